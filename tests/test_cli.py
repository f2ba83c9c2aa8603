"""Tests for the message inspector command."""

import io

import pytest

from rpcwire import inspect_message, inspect_stream, main

MESSAGES = [
    '{"jsonrpc":"2.0","id":1,"method":"sum","params":[1,2]}',
    '{"method":"log","jsonrpc":"2.0"}',
    "",
    '{"jsonrpc":"2.0","id":1,"result":3}',
]


class TestInspectMessage:
    def test_valid(self):
        text, ok = inspect_message('{"id":"a","jsonrpc":"2.0","method":"m"}')
        assert ok
        assert text == 'request\t{"jsonrpc":"2.0","id":"a","method":"m"}'

    def test_invalid_version(self):
        text, ok = inspect_message('{"jsonrpc":"1.0","method":"m"}')
        assert not ok
        assert text == (
            'error\t{"jsonrpc":"2.0","error":{"code":-32600,'
            '"message":"invalid JSON-RPC version","data":{"jsonrpc":"1.0"}}}'
        )

    def test_parse_error(self):
        text, ok = inspect_message("{")
        assert not ok
        assert text.startswith('error\t{"jsonrpc":"2.0","error":{"code":-32700,')

    def test_too_deeply_nested(self):
        text, ok = inspect_message("[" * 100_000 + "]" * 100_000)
        assert not ok
        assert text == (
            'error\t{"jsonrpc":"2.0","error":{"code":-32700,'
            '"message":"message is nested too deeply"}}'
        )


class TestInspectStream:
    def test_counts_failures(self):
        out = io.StringIO()
        failures = inspect_stream(MESSAGES + ['{"jsonrpc":"2.0","id":1}'], out)
        assert failures == 1
        assert out.getvalue().splitlines() == [
            'request\t{"jsonrpc":"2.0","id":1,"method":"sum","params":[1,2]}',
            'notification\t{"jsonrpc":"2.0","method":"log"}',
            'response\t{"jsonrpc":"2.0","id":1,"result":3}',
            'error\t{"jsonrpc":"2.0","error":{"code":-32600,"message":"invalid message type"}}',
        ]


class TestMain:
    def test_valid_file(self, tmp_path, capsys):
        path = tmp_path / "messages.jsonl"
        path.write_text("\n".join(MESSAGES) + "\n")

        main([str(path)])

        lines = capsys.readouterr().out.splitlines()
        assert [line.split("\t")[0] for line in lines] == ["request", "notification", "response"]

    def test_invalid_file_exits_with_error(self, tmp_path, capsys):
        path = tmp_path / "messages.jsonl"
        path.write_text('{"jsonrpc":"2.0","id":true,"method":"m"}\n')

        with pytest.raises(SystemExit) as exc:
            main([str(path), "--log-level", "DEBUG"])

        assert exc.value.code == 1
        out = capsys.readouterr().out
        assert '"message":"invalid id type: bool"' in out
