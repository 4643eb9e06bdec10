from app.config import AppSettings


def _settings(**values) -> AppSettings:
    return AppSettings(_env_file=None, **values)


def test_reads_infor_environment_names(monkeypatch):
    monkeypatch.setenv("INFOR_BASE_URL", "https://erp.example.com/ido")
    monkeypatch.setenv("TOKEN", "fallback-token")
    monkeypatch.setenv("INFOR_CONFIG", "TENANT_PRD")
    monkeypatch.setenv("IDO_RECORD_CAP", "250")
    monkeypatch.setenv("SERVICE_CODES", "labor, sv ,")

    settings = _settings()
    connection = settings.ido_connection()

    assert connection.base_url == "https://erp.example.com/ido"
    assert connection.token == "fallback-token"
    assert connection.config_name == "TENANT_PRD"
    assert connection.record_cap == 250
    assert connection.timeout_seconds is None
    assert settings.service_codes == frozenset({"LABOR", "SV"})


def test_infor_token_takes_precedence_over_token(monkeypatch):
    monkeypatch.setenv("INFOR_TOKEN", "primary")
    monkeypatch.setenv("TOKEN", "fallback")
    assert _settings().ido_token == "primary"


def test_defaults_request_full_collection(monkeypatch):
    for name in ("INFOR_TOKEN", "TOKEN", "IDO_RECORD_CAP", "SERVICE_CODES"):
        monkeypatch.delenv(name, raising=False)
    settings = _settings()
    assert settings.ido_record_cap == 0
    assert settings.service_codes == frozenset({"SERVICE", "SV", "SVR"})
    assert settings.ido_token == ""


def test_token_is_masked_for_logging():
    settings = _settings(ido_token="secret-token")
    logged = settings.dict_for_logging()
    assert logged["ido_token"] == "***"
    assert "secret-token" not in repr(logged)


def test_cors_origins_split_from_env(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://dash.example.com, https://ops.example.com")
    assert _settings().cors_origins == ["https://dash.example.com", "https://ops.example.com"]
