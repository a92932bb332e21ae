"""
서버리스 엔트리포인트 (Netlify / AWS Lambda 스타일)

플랫폼은 handler(event, context) 를 호출하고,
Mangum 이 이벤트를 ASGI 요청으로 바꿔 FastAPI 앱에 전달한다.
"""
from mangum import Mangum

from main import app

handler = Mangum(app, lifespan="auto")
