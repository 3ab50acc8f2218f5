import sys

from todolist.main import main

sys.exit(main())
