import pytest

import geminipy.__main__ as cli
from geminipy.config import TrustPolicy
from geminipy.gemini_protocol import Response
from geminipy.header import Header
from geminipy.status import StatusCode
from geminipy.errors import TransportConnectError


class FakeClient:
    response = None
    error = None
    configs = []

    def __init__(self, config):
        FakeClient.configs.append(config)

    def request(self, url):
        if FakeClient.error is not None:
            raise FakeClient.error
        return FakeClient.response


@pytest.fixture
def fake_client(monkeypatch):
    FakeClient.response = None
    FakeClient.error = None
    FakeClient.configs = []
    monkeypatch.setattr(cli, "GeminiClient", FakeClient)
    return FakeClient


def test_renders_gemtext_as_html(fake_client, capsys):
    fake_client.response = Response(Header(StatusCode.SUCCESS, "text/gemini; lang=en"), b"# Hi\n=> gemini://x/ there\n")

    assert cli.main(["gemini://example.org/", "--html", "--timeout", "5"]) == 0

    assert capsys.readouterr().out == '<h1>Hi</h1>\n<a href="gemini://x/">there</a>\n'
    assert fake_client.configs[0].timeout == 5.0
    assert fake_client.configs[0].trust_policy is TrustPolicy.ACCEPT_ANY


def test_writes_raw_body_without_html_flag(fake_client, capsysbinary):
    fake_client.response = Response(Header(StatusCode.SUCCESS, "image/png"), b"\x89PNG")

    assert cli.main(["gemini://example.org/image.png", "--verify"]) == 0

    assert capsysbinary.readouterr().out == b"\x89PNG"
    assert fake_client.configs[0].trust_policy is TrustPolicy.VERIFY


def test_non_success_status_exits_with_one(fake_client, capsys):
    fake_client.response = Response(Header(StatusCode.NOT_FOUND, "Not here"))

    assert cli.main(["gemini://example.org/missing"]) == 1

    assert capsys.readouterr().err == "51 Not here\n"


def test_client_errors_exit_with_message(fake_client):
    fake_client.error = TransportConnectError("Couldn't connect to address example.org:1965", "example.org:1965")

    with pytest.raises(SystemExit, match="Couldn't connect"):
        cli.main(["gemini://example.org/"])


def test_invalid_timeout_exits_with_message(fake_client):
    with pytest.raises(SystemExit, match="Invalid configuration"):
        cli.main(["gemini://example.org/", "--timeout", "0"])


def test_infinite_timeout_exits_with_message(fake_client):
    with pytest.raises(SystemExit, match="Invalid configuration"):
        cli.main(["gemini://example.org/", "--timeout", "inf"])
