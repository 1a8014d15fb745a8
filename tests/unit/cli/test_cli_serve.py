"""Tests for the serve subcommand."""

import pytest

from codelabmd.cli.commands import server
from codelabmd.cli.commands.server import handle_serve_command, is_http_url, open_browser
from codelabmd.constants import EXIT_ERROR, EXIT_FILE_ERROR, EXIT_SUCCESS


class FakeServer:
    """Stand-in for TCPServer whose serve loop is interrupted immediately."""

    instances: list["FakeServer"] = []

    def __init__(self, address, handler):
        self.address = address
        self.handler = handler
        self.server_address = (address[0], address[1] or 54321)
        self.closed = False
        FakeServer.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.closed = True
        return False

    def serve_forever(self):
        raise KeyboardInterrupt


class BusyServer:
    def __init__(self, address, handler):
        raise OSError(98, "Address already in use")


@pytest.fixture
def fake_server(monkeypatch):
    FakeServer.instances = []
    monkeypatch.setattr(server.socketserver, "TCPServer", FakeServer)
    return FakeServer


@pytest.fixture
def opened_urls(monkeypatch):
    urls: list[str] = []

    def fake_open(url):
        urls.append(url)
        return True

    monkeypatch.setattr(server.webbrowser, "open", fake_open)
    return urls


@pytest.mark.unit
@pytest.mark.cli
class TestServeCommand:
    """Test the static file server command."""

    def test_serves_directory_and_opens_browser(self, isolated_cwd, fake_server, opened_urls, capsys):
        """Test the default address and the browser URL."""
        site = isolated_cwd / "build"
        site.mkdir()

        result = handle_serve_command([str(site)])

        assert result == EXIT_SUCCESS
        httpd = fake_server.instances[0]
        assert httpd.address == ("localhost", 9090)
        assert httpd.handler.keywords["directory"] == str(site)
        assert httpd.closed
        assert opened_urls == ["http://localhost:9090/"]
        out = capsys.readouterr().out
        assert "Serving" in out
        assert "Shutting down server..." in out

    def test_custom_host_and_port(self, isolated_cwd, fake_server, opened_urls):
        """Test --host and --port."""
        assert handle_serve_command(["--host", "0.0.0.0", "--port", "8000"]) == EXIT_SUCCESS
        assert fake_server.instances[0].address == ("0.0.0.0", 8000)
        assert opened_urls == ["http://0.0.0.0:8000/"]

    def test_ephemeral_port_is_reported(self, isolated_cwd, fake_server, opened_urls):
        """Test the bound port is used when port 0 is requested."""
        assert handle_serve_command(["--port", "0"]) == EXIT_SUCCESS
        assert opened_urls == ["http://localhost:54321/"]

    def test_remote_url_serves_current_directory(self, isolated_cwd, fake_server, opened_urls):
        """Test an http URL is opened while the working directory is served."""
        assert handle_serve_command(["https://labs.example.com/lab1"]) == EXIT_SUCCESS
        assert fake_server.instances[0].handler.keywords["directory"] == "."
        assert opened_urls == ["https://labs.example.com/lab1"]

    def test_no_browser(self, isolated_cwd, fake_server, opened_urls):
        """Test --no-browser."""
        assert handle_serve_command(["--no-browser"]) == EXIT_SUCCESS
        assert opened_urls == []

    def test_missing_directory(self, isolated_cwd, fake_server, capsys):
        """Test a missing directory is a file error."""
        assert handle_serve_command(["nowhere"]) == EXIT_FILE_ERROR
        assert "Directory not found" in capsys.readouterr().err
        assert fake_server.instances == []

    def test_port_in_use(self, isolated_cwd, monkeypatch, capsys):
        """Test a bind failure is reported."""
        monkeypatch.setattr(server.socketserver, "TCPServer", BusyServer)

        assert handle_serve_command(["--no-browser"]) == EXIT_ERROR
        assert "already in use" in capsys.readouterr().err


@pytest.mark.unit
@pytest.mark.cli
class TestServeHelpers:
    """Test helper functions."""

    @pytest.mark.parametrize(
        "value,expected",
        [("http://x", True), ("https://x/y", True), ("build", False), ("ftp://x", False)],
    )
    def test_is_http_url(self, value, expected):
        """Test URL detection."""
        assert is_http_url(value) is expected

    def test_open_browser_failure_is_logged(self, monkeypatch, caplog):
        """Test a browser error does not propagate."""

        def broken_open(url):
            raise server.webbrowser.Error("no display")

        monkeypatch.setattr(server.webbrowser, "open", broken_open)
        open_browser("http://localhost:9090/")

        assert "Could not open browser" in caplog.text

    def test_open_browser_unavailable(self, monkeypatch, caplog):
        """Test a missing browser is logged."""
        monkeypatch.setattr(server.webbrowser, "open", lambda url: False)
        open_browser("http://localhost:9090/")

        assert "No browser available" in caplog.text
