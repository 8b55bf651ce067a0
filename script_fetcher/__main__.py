"""
모듈 실행 진입점

`python -m script_fetcher`로 스크립트 페처를 실행합니다.
"""

import sys

from .main import main

sys.exit(main())
