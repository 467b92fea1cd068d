from api._shared import json_response


def handler(request):
    # Health check; never touches the upstream feed
    return json_response({"ok": True}, 200)
