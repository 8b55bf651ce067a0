"""
스크립트 페처

인스턴스 메타데이터가 가리키는 시작/종료 스크립트를 가져와 저장합니다.
"""

__version__ = "1.0.0"
