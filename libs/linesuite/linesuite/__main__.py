import sys

from linesuite.cli import main

sys.exit(main())
