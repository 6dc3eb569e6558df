import logging
import sys

from spriterotate.config import LOG_LEVEL
from spriterotate.demo import Demo


def main():
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    demo = Demo()
    demo.run()
    sys.exit()


if __name__ == "__main__":
    main()
