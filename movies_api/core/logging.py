import logging
import sys

def setup_logging(level: str = "INFO") -> None:
    """
    앱 전체 로깅 기본 설정.
    - stdout으로 출력
    - 포맷 통일
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

# 다른 모듈들이 import해서 쓰는 공용 logger
logger = logging.getLogger("movies_api")
