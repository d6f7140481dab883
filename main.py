"""斗地主牌型工具 - 主入口"""

import sys

from ddz.cli import main


if __name__ == "__main__":
    sys.exit(main())
