# main.py
import sys

from astar_engine.app.demo import main

if __name__ == "__main__":
    sys.exit(main())
