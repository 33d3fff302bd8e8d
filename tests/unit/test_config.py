import logging

import pytest
from pydantic import ValidationError

from worqhat import WorqHatClient
from worqhat.config import DEFAULT_BASE_URL, Configuration, get_logger
from worqhat.exceptions import ConfigurationError


class TestConfiguration:
    def test_default_values(self):
        """Test default configuration values"""
        config = Configuration(api_key="test-key")

        assert config.api_key == "test-key"
        assert config.debug is False
        assert config.max_retries == 2
        assert config.retry_delay == 0.5
        assert config.timeout == 60.0
        assert config.base_url == DEFAULT_BASE_URL == "https://api.worqhat.com"

    def test_custom_values(self):
        config = Configuration(
            api_key="k",
            debug=True,
            max_retries=5,
            retry_delay=0.1,
            timeout=10,
            base_url="http://localhost:9000",
        )

        assert config.debug is True
        assert config.max_retries == 5
        assert config.retry_delay == 0.1
        assert config.timeout == 10.0
        assert config.base_url == "http://localhost:9000"

    def test_trailing_slash_stripped_from_base_url(self):
        config = Configuration(api_key="k", base_url="https://example.com/")
        assert config.base_url == "https://example.com"

    def test_reads_environment_variables(self, monkeypatch):
        monkeypatch.setenv("WORQHAT_API_KEY", "env-key")
        monkeypatch.setenv("WORQHAT_DEBUG", "true")
        monkeypatch.setenv("WORQHAT_MAX_RETRIES", "7")

        config = Configuration()

        assert config.api_key == "env-key"
        assert config.debug is True
        assert config.max_retries == 7

    def test_explicit_values_override_environment(self, monkeypatch):
        monkeypatch.setenv("WORQHAT_API_KEY", "env-key")
        assert Configuration(api_key="explicit").api_key == "explicit"

    def test_reads_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("WORQHAT_API_KEY=dotenv-key\n")
        assert Configuration().api_key == "dotenv-key"

    def test_missing_api_key_rejected(self):
        with pytest.raises(ValidationError):
            Configuration()

    def test_empty_api_key_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Configuration(api_key="")
        assert "API Key is required" in str(exc_info.value)

    def test_non_string_api_key_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Configuration(api_key=12345)
        assert "API Key must be a string" in str(exc_info.value)

    @pytest.mark.parametrize(
        "field,value",
        [("max_retries", -1), ("retry_delay", -0.5), ("timeout", 0)],
    )
    def test_out_of_range_values_rejected(self, field, value):
        with pytest.raises(ValidationError):
            Configuration(api_key="k", **{field: value})

    def test_frozen(self):
        config = Configuration(api_key="k")
        with pytest.raises(ValidationError):
            config.max_retries = 10

    def test_model_copy_creates_independent_config(self):
        config = Configuration(api_key="k")
        other = config.model_copy(update={"max_retries": 9})

        assert other.max_retries == 9
        assert config.max_retries == 2


class TestClientOverrides:
    @pytest.mark.parametrize(
        "field,value",
        [("max_retries", -1), ("retry_delay", -1), ("timeout", 0)],
    )
    def test_invalid_override_on_configuration_rejected(self, field, value):
        config = Configuration(api_key="k")

        with pytest.raises(ConfigurationError, match=f"Invalid configuration: {field}"):
            WorqHatClient(config, **{field: value})

    def test_empty_api_key_override_rejected(self):
        with pytest.raises(ConfigurationError, match="API Key is required"):
            WorqHatClient(Configuration(api_key="k"), api_key="")

    def test_valid_override_keeps_other_values(self):
        config = Configuration(api_key="k", timeout=5, base_url="http://localhost:9000")
        client = WorqHatClient(config, max_retries=0)

        assert client.max_retries == 0
        assert client.config.timeout == 5.0
        assert client.config.base_url == "http://localhost:9000"
        assert client.api_key == "k"


class TestLogging:
    @pytest.fixture(autouse=True)
    def restore_logger(self):
        logger = logging.getLogger("worqhat")
        handlers, level = list(logger.handlers), logger.level
        yield
        logger.handlers = handlers
        logger.setLevel(level)

    def test_get_logger_namespaced(self):
        assert get_logger("client").name == "worqhat.client"
        assert get_logger("ai.images").name == "worqhat.ai.images"

    def test_setup_logging_debug(self):
        logger = logging.getLogger("worqhat")
        logger.handlers = []

        Configuration(api_key="k", debug=True).setup_logging()

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_setup_logging_does_not_duplicate_handlers(self):
        logger = logging.getLogger("worqhat")
        logger.handlers = []
        config = Configuration(api_key="k")

        config.setup_logging()
        config.setup_logging()

        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
