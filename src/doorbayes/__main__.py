import sys

from doorbayes.experiment.cli import main

if __name__ == "__main__":
    sys.exit(main())
