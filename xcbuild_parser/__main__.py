import sys

from xcbuild_parser.cli import main

sys.exit(main())
