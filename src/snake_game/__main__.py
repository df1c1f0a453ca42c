import sys

from snake_game.cli import main

sys.exit(main())
