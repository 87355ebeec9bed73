import sys

from companytree.main import main

sys.exit(main())
