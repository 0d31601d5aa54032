import logging
import sys

from .config import RecoveryConfig
from .exceptions import LagrangeZeroError
from .loader import load_file, solve


def main(argv=None):
    config = RecoveryConfig.load_config(argv)
    logging.getLogger().setLevel(config.log_level)

    try:
        points = load_file(config.input_path)
        result = solve(points)
    except (LagrangeZeroError, OSError) as e:
        logging.error(f"{type(e).__name__}: {e}")
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
