import sys

from genresume.main import main

sys.exit(main())
