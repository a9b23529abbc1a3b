import io
import threading
import urllib.request

from tddkit.greetings import greet, hello, make_server


def test_hello_with_name():
    assert hello("Mitsuki") == "Hello, Mitsuki"


def test_hello_with_empty_name():
    assert hello("") == "Hello, World"


def test_greet():
    buffer = io.StringIO()
    greet(buffer, "Chris")
    assert buffer.getvalue() == "Hello, Chris"


def test_greeter_server():
    server = make_server("127.0.0.1", 0)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        port = server.server_address[1]
        with urllib.request.urlopen(f"http://127.0.0.1:{port}/", timeout=5) as response:
            status = response.status
            body = response.read().decode("utf-8")
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)
    assert status == 200
    assert body == "Hello, world"