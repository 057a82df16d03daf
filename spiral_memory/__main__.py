import sys

from spiral_memory.cli import main

sys.exit(main())
