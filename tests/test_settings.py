from wordguesser.settings import Settings, get_settings, llm_enabled


def test_defaults(monkeypatch):
    for name in ("OFFLINE_MODE", "OPENAI_API_KEY", "MODEL_NAME", "DICTIONARY_FILE", "SHOW_COUNT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    assert get_settings() == Settings()


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("OFFLINE_MODE", "False")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("SHOW_COUNT", "TRUE")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = get_settings()
    assert s.offline_mode is False
    assert s.show_count is True
    assert s.log_level == "DEBUG"
    assert llm_enabled(s)


def test_llm_needs_key_and_online():
    assert not llm_enabled(Settings(offline_mode=True, openai_api_key="sk-test"))
    assert not llm_enabled(Settings(offline_mode=False, openai_api_key=""))
    assert llm_enabled(Settings(offline_mode=False, openai_api_key="sk-test"))
