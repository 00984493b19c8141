import sys

from twentyone.main import main

sys.exit(main())
