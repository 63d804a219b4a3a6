import json

import cli
from src.reformulation.handler import ReformulationHandler
from src.reformulation.types import GenerationResult, VerificationResult


class _Verifier:
    def verify(self, secret, token):
        return VerificationResult(success=True, score=0.9)


class _Generator:
    def generate(self, request, api_key):
        return GenerationResult(text="Ahoy, world!")


def _handler(env):
    return ReformulationHandler(env=env, verifier=_Verifier(), generator=_Generator())


def test_cli_inline_body(env, capsys):
    body = json.dumps({"inputText": "Hello world", "style": "pirate", "token": "abc"})
    code = cli.main([body], handler=_handler(env))
    out = json.loads(capsys.readouterr().out)
    assert code == 0
    assert out["statusCode"] == 200
    assert json.loads(out["body"]) == {"reformulatedText": "Ahoy, world!"}


def test_cli_file_body_and_method(env, tmp_path, capsys):
    p = tmp_path / "request.json"
    p.write_text(json.dumps({"inputText": "x", "style": "y", "token": "z"}), encoding="utf-8")
    code = cli.main([f"@{p}", "--method", "GET", "--pretty"], handler=_handler(env))
    out = json.loads(capsys.readouterr().out)
    assert code == 1
    assert out["statusCode"] == 405


def test_cli_unreadable_file(env, tmp_path):
    assert cli.main([f"@{tmp_path / 'missing.json'}"], handler=_handler(env)) == 2
