import json
from pathlib import Path

from click.testing import CliRunner
from pytest_httpx import HTTPXMock

from netrouter._cli import cli


class TestSend:
    def test_get_with_query(
        self, runner: CliRunner, httpx_mock: HTTPXMock, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/items?q=shoes", json=[{"id": 1, "name": "x"}]
        )

        result = runner.invoke(
            cli, ["send", base_url, "/items", "-q", "q=shoes", "--insecure"]
        )

        assert result.exit_code == 0
        assert json.loads(result.output) == [{"id": 1, "name": "x"}]

    def test_post_fields_and_headers(
        self, runner: CliRunner, httpx_mock: HTTPXMock, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/items", method="POST", json={"id": 2, "name": "boot"}
        )

        result = runner.invoke(
            cli,
            [
                "send",
                base_url,
                "/items",
                "-X",
                "post",
                "-F",
                "name=boot",
                "-H",
                "X-Trace: abc",
                "--insecure",
            ],
        )

        assert result.exit_code == 0

        sent_request = httpx_mock.get_request()
        if sent_request is None:
            raise Exception("No request was sent")

        assert sent_request.headers["X-Trace"] == "abc"
        assert json.loads(sent_request.content) == {"name": "boot"}

    def test_file_upload_is_multipart(
        self,
        runner: CliRunner,
        httpx_mock: HTTPXMock,
        base_url: str,
        temp_dir: str,
    ) -> None:
        httpx_mock.add_response(url=f"{base_url}/upload", method="POST", json={})
        avatar = Path(temp_dir) / "me.png"
        avatar.write_bytes(b"PNGDATA")

        result = runner.invoke(
            cli,
            ["send", base_url, "/upload", "-X", "POST", "--file", f"avatar={avatar}", "--insecure"],
        )

        assert result.exit_code == 0

        sent_request = httpx_mock.get_request()
        if sent_request is None:
            raise Exception("No request was sent")

        assert sent_request.headers["Content-Type"].startswith("multipart/form-data")
        assert b'filename="me.png"' in sent_request.read()

    def test_base_url_from_env(
        self,
        runner: CliRunner,
        httpx_mock: HTTPXMock,
        base_url: str,
        monkeypatch,
    ) -> None:
        monkeypatch.setenv("NETROUTER_BASE_URL", base_url)
        monkeypatch.setenv("NETROUTER_VERIFY_SSL", "false")
        httpx_mock.add_response(json={"ok": True})

        result = runner.invoke(cli, ["send"])

        assert result.exit_code == 0
        assert json.loads(result.output) == {"ok": True}

    def test_table_output(
        self, runner: CliRunner, httpx_mock: HTTPXMock, base_url: str
    ) -> None:
        httpx_mock.add_response(json=[{"id": 1, "name": "shoe"}])

        result = runner.invoke(
            cli, ["send", base_url, "/items", "--format", "table", "--insecure"]
        )

        assert result.exit_code == 0
        assert "shoe" in result.output
        assert "name" in result.output

    def test_status_error_exit_code(
        self, runner: CliRunner, httpx_mock: HTTPXMock, base_url: str
    ) -> None:
        httpx_mock.add_response(status_code=500)

        result = runner.invoke(cli, ["send", base_url, "/items", "--insecure"])

        assert result.exit_code == 1
        assert "Error: Server error" in result.output

    def test_build_error_exit_code(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["send", "not-a-url", "/items"])

        assert result.exit_code == 2
        assert "Could not build request" in result.output

    def test_missing_base_url(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["send"])

        assert result.exit_code == 2
        assert "NETROUTER_BASE_URL" in result.output

    def test_invalid_pair(self, runner: CliRunner, base_url: str) -> None:
        result = runner.invoke(cli, ["send", base_url, "-q", "novalue"])

        assert result.exit_code == 2
        assert "expected KEY=VALUE" in result.output

    def test_output_file(
        self,
        runner: CliRunner,
        httpx_mock: HTTPXMock,
        base_url: str,
        temp_dir: str,
    ) -> None:
        httpx_mock.add_response(json={"id": 1})
        output = Path(temp_dir) / "out.json"

        result = runner.invoke(
            cli, ["send", base_url, "/items/1", "-o", str(output), "--insecure"]
        )

        assert result.exit_code == 0
        assert json.loads(output.read_text(encoding="utf-8")) == {"id": 1}


class TestClassify:
    def test_success(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["classify", "204"])

        assert result.exit_code == 0
        assert "204: SUCCESS (success)" in result.output

    def test_failure(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["classify", "403"])

        assert result.exit_code == 0
        assert "AUTHENTICATION_ERROR - You need to be authenticated first." in result.output
