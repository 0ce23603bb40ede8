import sys

import numpy as np

from random_image.image_gen import generate_image
from random_image.parser import parse_args


def main(argv=None, prog=None):
    width, height, path = parse_args(argv, prog)
    rng = np.random.default_rng()

    try:
        with open(path, "wb") as target:
            generate_image(width, height, target, rng)
    except (OSError, ValueError) as e:
        print(f"Error writing {path}: {e}", file=sys.stderr)
        return 1

    print(f"Saved {path} ({width}x{height})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
