from api._shared import build_sheet_response


def handler(request):
    """Serverless entry: ?sheet=<id> -> (body, status, headers)."""
    result = build_sheet_response(request.args.get('sheet'))
    return result.as_tuple()
