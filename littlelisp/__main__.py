import sys

from littlelisp.interpreter import main

sys.exit(main())
