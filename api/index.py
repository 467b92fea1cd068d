from flask import Flask, Response, request

from api._shared import build_sheet_response, json_response

# Vercel: export a WSGI Flask app named `app` with ONLY API routes (no static serving)
app = Flask(__name__, static_folder=None)


def _as_json(body: str, status: int, headers: dict) -> Response:
    return Response(body, status=status, headers=headers, mimetype='application/json')


@app.get('/sheet')
@app.get('/api/sheet')
def api_sheet():
    result = build_sheet_response(request.args.get('sheet'))
    if result.error is not None:
        # Surface the underlying failure to the host's error tracking
        app.logger.error("Sheet serialization failed: %s", result.error, exc_info=result.error)
    return _as_json(result.body, result.status, result.headers)


@app.get('/health')
@app.get('/api/health')
def api_health():
    return _as_json(*json_response({'ok': True}))
