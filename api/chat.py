from http.server import BaseHTTPRequestHandler

from gemini_relay import RelayHandler, RelayRequest, Settings

# GEMINI_API_KEY / ALLOWED_ORIGINS come from Vercel project settings
RELAY = RelayHandler(Settings.from_env())


def content_length(headers):
    # Garbage or negative lengths read as an empty body (-> 400 invalid JSON)
    try:
        length = int(headers.get('Content-Length', 0) or 0)
    except ValueError:
        return 0
    return max(length, 0)


class handler(BaseHTTPRequestHandler):
    def do_OPTIONS(self):
        self.relay()

    def do_POST(self):
        self.relay()

    def do_GET(self):
        self.relay()

    def do_HEAD(self):
        self.relay()

    def do_PUT(self):
        self.relay()

    def do_PATCH(self):
        self.relay()

    def do_DELETE(self):
        self.relay()

    def relay(self):
        length = content_length(self.headers)
        body = self.rfile.read(length) if length else b""

        result = RELAY.handle(RelayRequest(
            method=self.command,
            headers=self.headers.items(),
            body=body,
        ))

        payload = result.body.encode('utf-8')
        self.send_response(result.status)
        for name, value in result.headers.items():
            self.send_header(name, value)
        if result.status != 204:
            self.send_header('Content-Length', str(len(payload)))
        self.end_headers()
        if payload and self.command != 'HEAD':
            self.wfile.write(payload)
