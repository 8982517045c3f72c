import sys

from tictactoe.app import main

sys.exit(main())
