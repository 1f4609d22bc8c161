"""Unit tests for the Punycode MCP server wiring.

This test suite covers:
- Initialization and configuration loading
- Fallbacks for missing, malformed and non-mapping config files
- Feature flags
- Tool, prompt and resource registration capability
- Codec resources

No server is started; FastMCP is only used to register components.
"""

import os
import tempfile
from unittest.mock import AsyncMock, patch

import pytest

from punynode.resource_mixins import bootstring_parameters, label_separators
from punynode.server import PunycodeMCPServer, load_config

# Default config for testing
DEFAULT_TEST_CONFIG = """
server:
  host: "127.0.0.1"
  port: 3100

features:
  email_addresses: true
  raw_codec: true
  ucs2_tools: true
"""

RESTRICTED_TEST_CONFIG = """
features:
  raw_codec: false
  ucs2_tools: false
"""


def _write_config(content: str) -> str:
    config = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False, encoding="utf-8")
    config.write(content)
    config.close()
    return config.name


class TestLoadConfig:
    """Test suite for configuration loading."""

    @pytest.mark.unit
    def test_valid_config(self):
        """Test that a valid YAML file is parsed."""
        path = _write_config(DEFAULT_TEST_CONFIG)
        try:
            config = load_config(path)
        finally:
            os.unlink(path)

        assert config["server"]["port"] == 3100
        assert config["features"]["raw_codec"] is True

    @pytest.mark.unit
    def test_missing_file(self):
        """Test that a missing file yields an empty config."""
        assert load_config("/nonexistent/path/config.yaml") == {}

    @pytest.mark.unit
    def test_invalid_yaml(self):
        """Test that malformed YAML yields an empty config."""
        path = _write_config("features: [unclosed\n  - : :")
        try:
            assert load_config(path) == {}
        finally:
            os.unlink(path)

    @pytest.mark.unit
    def test_non_mapping(self):
        """Test that a YAML document that is not a mapping is ignored."""
        path = _write_config("- just\n- a list\n")
        try:
            assert load_config(path) == {}
        finally:
            os.unlink(path)

    @pytest.mark.unit
    def test_empty_file(self):
        """Test that an empty file yields an empty config."""
        path = _write_config("")
        try:
            assert load_config(path) == {}
        finally:
            os.unlink(path)


class TestPunycodeMCPServer:
    """Test suite for PunycodeMCPServer initialization."""

    @pytest.fixture
    def temp_config(self):
        """Create a temporary config file for tests."""
        path = _write_config(DEFAULT_TEST_CONFIG)
        yield path
        os.unlink(path)

    @pytest.mark.server
    @pytest.mark.unit
    def test_initialization_with_valid_config(self, temp_config):
        """Test that server initializes successfully with valid config."""
        server = PunycodeMCPServer(config_path=temp_config)

        assert server.config_path == temp_config
        assert hasattr(server, "server")
        assert hasattr(server, "logger")
        assert server.config["server"]["host"] == "127.0.0.1"

    @pytest.mark.server
    @pytest.mark.unit
    def test_initialization_with_missing_config(self):
        """Test that server initializes with defaults when the config is missing."""
        server = PunycodeMCPServer(config_path="/nonexistent/path/config.yaml")

        assert server.config == {}
        assert server.feature_enabled("email_addresses", True) is True
        assert server.feature_enabled("raw_codec") is False

    @pytest.mark.server
    @pytest.mark.unit
    def test_feature_flags(self, temp_config):
        """Test that feature flags are read from the config."""
        server = PunycodeMCPServer(config_path=temp_config)

        assert server.feature_enabled("raw_codec") is True
        assert server.feature_enabled("ucs2_tools") is True
        assert server.feature_enabled("unknown_feature") is False

    @pytest.mark.server
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_feature_flags_gate_registered_components(self):
        """Test that disabled features register their tools and prompt as disabled."""
        path = _write_config(RESTRICTED_TEST_CONFIG)
        try:
            server = PunycodeMCPServer(config_path=path)
        finally:
            os.unlink(path)

        tools = await server.server.get_tools()
        prompts = await server.server.get_prompts()

        for name in ("idn_to_ascii", "idn_to_unicode", "inspect_domain"):
            assert tools[name].enabled is True
        for name in ("punycode_encode", "punycode_decode", "ucs2_encode", "ucs2_decode"):
            assert name not in tools or tools[name].enabled is False
        assert prompts["punycode_converter"].enabled is True
        assert "raw_punycode" not in prompts or prompts["raw_punycode"].enabled is False

    @pytest.mark.server
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_enabled_features_register_components(self, temp_config):
        """Test that enabled features register their tools and prompt as enabled."""
        server = PunycodeMCPServer(config_path=temp_config)

        tools = await server.server.get_tools()
        prompts = await server.server.get_prompts()

        for name in ("punycode_encode", "punycode_decode", "ucs2_encode", "ucs2_decode"):
            assert tools[name].enabled is True
        assert prompts["raw_punycode"].enabled is True

    @pytest.mark.server
    @pytest.mark.unit
    def test_bind_address_from_config(self, temp_config):
        """Test that the listen address comes from arguments, then config."""
        server = PunycodeMCPServer(config_path=temp_config)

        assert server.bind_address() == ("127.0.0.1", 3100)
        assert server.bind_address("0.0.0.0", 8080) == ("0.0.0.0", 8080)

    @pytest.mark.server
    @pytest.mark.unit
    def test_bind_address_defaults(self):
        """Test the fallback address without a server section."""
        server = PunycodeMCPServer(config_path="/nonexistent/path/config.yaml")

        assert server.bind_address() == ("127.0.0.1", 3000)

    @pytest.mark.server
    @pytest.mark.unit
    def test_registration_capability(self, temp_config):
        """Test that the FastMCP instance exposes the registration decorators."""
        server = PunycodeMCPServer(config_path=temp_config)

        assert callable(getattr(server.server, "tool", None))
        assert callable(getattr(server.server, "prompt", None))
        assert callable(getattr(server.server, "resource", None))

    @pytest.mark.server
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_start_uses_config_host_and_port(self, temp_config):
        """Test that start() passes the configured address to the transport."""
        server = PunycodeMCPServer(config_path=temp_config)

        with patch.object(server.server, "run_async", new=AsyncMock()) as run_async, \
                patch.object(server, "setup_signal_handlers"):
            await server.start()

        run_async.assert_awaited_once_with(
            transport="http", host="127.0.0.1", port=3100, log_level="DEBUG"
        )

    @pytest.mark.server
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_start_failure_stops_server(self, temp_config):
        """Test that a transport error stops the server and propagates."""
        server = PunycodeMCPServer(config_path=temp_config)

        with patch.object(
            server.server, "run_async", new=AsyncMock(side_effect=OSError("in use"))
        ), patch.object(server, "setup_signal_handlers"), patch.object(
            server, "stop", new=AsyncMock()
        ) as stop:
            with pytest.raises(OSError):
                await server.start(port=3101)

        stop.assert_awaited_once()


class TestCodecResources:
    """Test suite for the resource payloads."""

    @pytest.mark.unit
    def test_bootstring_parameters(self):
        """Test the RFC 3492 parameter values."""
        params = bootstring_parameters()

        assert params["base"] == 36
        assert params["tmin"] == 1
        assert params["tmax"] == 26
        assert params["skew"] == 38
        assert params["damp"] == 700
        assert params["initial_bias"] == 72
        assert params["initial_n"] == 128
        assert params["delimiter"] == "-"
        assert params["max_int"] == 2**31 - 1

    @pytest.mark.unit
    def test_label_separators(self):
        """Test the separator listing."""
        info = label_separators()

        assert info["separators"] == ["U+002E", "U+3002", "U+FF0E", "U+FF61"]
        assert info["ace_prefix"] == "xn--"
