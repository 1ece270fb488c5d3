import sys

from clangdconf.main import main

if __name__ == "__main__":
    sys.exit(main())
