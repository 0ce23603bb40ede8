import sys

from random_image.main import main

sys.exit(main(prog="python -m random_image"))
