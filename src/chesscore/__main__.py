import sys

from chesscore.console import main

sys.exit(main())
