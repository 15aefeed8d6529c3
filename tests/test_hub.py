import asyncio
import json
import sys

import pytest

from hubconfig.core.config_model import HubSettings
from hubconfig.core.config_view import ConfigView
from hubconfig.core.errors import DownloadError, ParseError
from hubconfig.core.hub import Hub
from hubconfig.core.ports import ByteFetcher


class _Fetcher(ByteFetcher):
    def __init__(self, payload=b"{}", error=None):
        self.payload = payload
        self.error = error
        self.urls = []

    async def fetch_bytes(self, url: str) -> bytes:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.payload


def _hub(fetcher, **settings):
    return Hub(fetcher, HubSettings(**settings))


def _download(hub, repo_id="bert-base-uncased", filename="config.json"):
    return asyncio.run(hub.download_config(repo_id, filename))


def test_url_for_default_settings():
    hub = _hub(_Fetcher())
    assert (
        hub.url_for("bert-base-uncased", "config.json")
        == "https://huggingface.co/bert-base-uncased/resolve/main/config.json"
    )


def test_url_for_inserts_values_verbatim():
    hub = _hub(_Fetcher(), endpoint="http://localhost:8080/", revision="v1.0")
    assert hub.url_for("org/model name", "sub/tokenizer.json") == (
        "http://localhost:8080/org/model name/resolve/v1.0/sub/tokenizer.json"
    )


def test_download_config_scalar():
    fetcher = _Fetcher(payload=json.dumps({"hidden_size": 768}).encode())
    config = _download(_hub(fetcher))

    assert config.navigate("hiddenSize").int_value == 768
    assert fetcher.urls == ["https://huggingface.co/bert-base-uncased/resolve/main/config.json"]


def test_download_config_string_and_missing():
    config = _download(_hub(_Fetcher(payload=b'{"model_type": "bert"}')))

    assert config.navigate("modelType").string_value == "bert"
    assert config.navigate("missingField") is None


def test_download_config_array_of_objects():
    payload = b'{"layers": [{"name": "a"}, {"name": "b"}]}'
    config = _download(_hub(_Fetcher(payload=payload)))

    layers = config.navigate("layers").array_value
    assert len(layers) == 2
    assert layers[0].navigate("name").string_value == "a"


@pytest.mark.parametrize("payload", [b"[1,2,3]", b'"text"', b"42", b"null"])
def test_download_config_rejects_non_object_top_level(payload):
    with pytest.raises(ParseError):
        _download(_hub(_Fetcher(payload=payload)))


@pytest.mark.parametrize(
    "payload",
    [
        b"{not json",
        b"",
        b"\xc3\x28",
        b"[" * 100000,
    ],
)
def test_download_config_malformed_bytes_are_parse_errors(payload):
    with pytest.raises(ParseError):
        _download(_hub(_Fetcher(payload=payload)))


@pytest.mark.skipif(
    getattr(sys, "get_int_max_str_digits", lambda: 0)() == 0,
    reason="no integer digit limit on this interpreter",
)
def test_oversized_integer_literal_is_parse_error():
    payload = b'{"n": ' + b"1" * (sys.get_int_max_str_digits() + 1000) + b"}"
    with pytest.raises(ParseError):
        Hub.decode_config(payload)


def test_decode_config_accepts_utf8_bom():
    config = Hub.decode_config(b'\xef\xbb\xbf{"hidden_size": 768}')
    assert config.navigate("hiddenSize").int_value == 768


def test_decode_config_deeply_nested_arrays():
    depth = 700
    config = Hub.decode_config(b'{"a": ' + b"[" * depth + b"]" * depth + b"}")

    value = config.navigate("a").value
    for _ in range(depth - 1):
        assert isinstance(value, tuple)
        value = value[0]
    assert value == ()


def test_download_error_propagates():
    fetcher = _Fetcher(error=DownloadError("boom", url="x"))
    with pytest.raises(DownloadError):
        _download(_hub(fetcher))


def test_decode_config():
    assert Hub.decode_config(b'{"a": {"b": 1}}') == ConfigView({"a": {"b": 1}})


def test_concurrent_downloads_are_independent():
    fetcher = _Fetcher(payload=b'{"x": 1}')
    hub = _hub(fetcher)

    async def _both():
        return await asyncio.gather(
            hub.download_config("a/one", "config.json"),
            hub.download_config("b/two", "config.json"),
        )

    first, second = asyncio.run(_both())
    assert first == second
    assert len(fetcher.urls) == 2


def test_hub_defaults_to_public_hub_settings():
    hub = Hub(_Fetcher())

    assert hub.settings == HubSettings()
    assert hub.url_for("r", "f.json") == "https://huggingface.co/r/resolve/main/f.json"


def test_package_exports():
    import hubconfig

    assert hubconfig.Hub is Hub
    assert hubconfig.ConfigView is ConfigView
    assert issubclass(hubconfig.ParseError, hubconfig.HubClientError)
