"""
App layer: 웹 서버 (FastAPI).

역할:
- 설정 로드, 라우팅, 정적 파일
- 렌더링 로직 없음 (render에 위임)

주의: 폴더 구분
- src/render/ → 코드 (page.py)
- templates/ (루트) → HTML 템플릿 (레이아웃, partial, 페이지)
- src/app/static/ → CSS
"""
