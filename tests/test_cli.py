from pathlib import Path
from unittest.mock import patch

import httpx
from click.testing import CliRunner

from api_console.cli import main
from api_console.console.transport import TransportInvoker
from api_console.docs.detect import load_doc

FIXTURES = Path(__file__).parent / "fixtures"


def _mock_invoker(handler):
    """Stand-in for TransportInvoker() that routes requests to handler."""
    return lambda: TransportInvoker(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))


class TestCliEndpoints:
    def test_lists_builtin_paste_docs(self):
        runner = CliRunner()
        result = runner.invoke(main, ["endpoints", "--base-url", "http://paste.test"])

        assert result.exit_code == 0
        assert "(http://paste.test)" in result.output
        assert "[create-record]" in result.output
        assert "key (path) required" in result.output
        assert "ttl (query) default=" in result.output

    def test_lists_openapi_doc(self):
        runner = CliRunner()
        result = runner.invoke(main, ["endpoints", "--doc", str(FIXTURES / "petstore.yaml")])

        assert result.exit_code == 0
        assert "## pets" in result.output
        assert "[listPets]" in result.output

    def test_rejects_unknown_doc_format(self, tmp_path):
        f = tmp_path / "doc.md"
        f.write_text("# API Docs")
        runner = CliRunner()
        result = runner.invoke(main, ["endpoints", "--doc", str(f)])

        assert result.exit_code != 0
        assert "--doc" in result.output


class TestCliTry:
    def test_get_record(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, text="hello")

        with patch("api_console.cli.TransportInvoker", _mock_invoker(handler)):
            runner = CliRunner()
            result = runner.invoke(main, ["try", "get-record", "--base-url", "http://paste.test", "-p", "key=abc"])

        assert result.exit_code == 0
        assert str(seen[0].url) == "http://paste.test/abc"
        assert "HTTP 200" in result.output
        assert "hello" in result.output

    def test_create_record_sends_plain_body_and_defaults(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, text="http://paste.test/xyz/")

        with patch("api_console.cli.TransportInvoker", _mock_invoker(handler)):
            runner = CliRunner()
            result = runner.invoke(main, [
                "try", "create-record", "--base-url", "http://paste.test",
                "-p", "body=some text", "-p", "ttl=3h",
                "-H", "X-Client: cli",
            ])

        assert result.exit_code == 0
        request = seen[0]
        assert request.method == "POST"
        assert request.content == b"some text"
        assert request.headers["Content-Type"] == "text/plain"
        assert request.headers["X-Client"] == "cli"
        assert request.url.params["ttl"] == "3h"
        assert request.url.params["len"] == "14"

    def test_server_error_still_exits_zero(self):
        handler = lambda request: httpx.Response(500, text="internal error")
        with patch("api_console.cli.TransportInvoker", _mock_invoker(handler)):
            runner = CliRunner()
            result = runner.invoke(main, ["try", "get-record", "-p", "key=abc"])

        assert result.exit_code == 0
        assert "HTTP 500" in result.output
        assert "internal error" in result.output

    def test_empty_path_parameter_fails(self):
        handler = lambda request: httpx.Response(200)
        with patch("api_console.cli.TransportInvoker", _mock_invoker(handler)):
            runner = CliRunner()
            result = runner.invoke(main, ["try", "get-record-clicks"])

        assert result.exit_code == 1
        assert "Error: path parameter 'key' cannot be empty" in result.output

    def test_non_ascii_header_fails_cleanly(self):
        handler = lambda request: httpx.Response(200)
        with patch("api_console.cli.TransportInvoker", _mock_invoker(handler)):
            runner = CliRunner()
            result = runner.invoke(main, ["try", "get-record", "-p", "key=abc", "-H", "X-Name: Jürgen"])

        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "Error: header 'X-Name'" in result.output

    def test_unknown_endpoint(self):
        runner = CliRunner()
        result = runner.invoke(main, ["try", "delete-everything"])

        assert result.exit_code != 0
        assert "no endpoint with id" in result.output

    def test_bad_param_syntax(self):
        runner = CliRunner()
        result = runner.invoke(main, ["try", "get-record", "-p", "key"])

        assert result.exit_code != 0
        assert "NAME=VALUE" in result.output


class TestCliExport:
    def test_export_builtin_docs(self, tmp_path):
        output = tmp_path / "docs" / "paste.yaml"
        runner = CliRunner()
        result = runner.invoke(main, ["export", "--base-url", "http://paste.test", "-o", str(output)])

        assert result.exit_code == 0
        doc = load_doc(output)
        assert doc.base_url == "http://paste.test"
        assert doc.find_endpoint("get-record").path == "/{key}"
