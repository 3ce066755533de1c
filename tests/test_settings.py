from __future__ import annotations

import pytest
from pydantic import ValidationError

from swaps.models.state import make_initial_state
from swaps.models.token import Token
from swaps.reducer import Action, swaps_reducer
from swaps.selectors import add_metadata
from swaps.settings.config import Settings
from swaps.store import make_root_state


def test_settings_defaults(monkeypatch):
    for name in ("SWAPS_MAINNET_CHAIN_ID", "SWAPS_MAX_TOKENS_WITH_BALANCE", "SWAPS_CONTRACT_METADATA_PATH"):
        monkeypatch.delenv(name, raising=False)

    config = Settings()

    assert config.swaps_mainnet_chain_id == "1"
    assert config.swaps_max_tokens_with_balance == 5
    assert config.contract_metadata_path is None


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("SWAPS_MAINNET_CHAIN_ID", "5")
    monkeypatch.setenv("SWAPS_MAX_TOKENS_WITH_BALANCE", "8")
    monkeypatch.setenv("LOG_FILE", "/var/log/swaps/app.log")

    config = Settings()

    assert config.swaps_mainnet_chain_id == "5"
    assert config.swaps_max_tokens_with_balance == 8
    assert str(config.log_path) == "/var/log/swaps/app.log"


def test_settings_reject_non_positive_cap(monkeypatch):
    monkeypatch.setenv("SWAPS_MAX_TOKENS_WITH_BALANCE", "0")

    with pytest.raises(ValidationError):
        Settings()


def test_make_root_state_coerces_dicts_and_keeps_model_lists():
    tokens = [Token(address="0xa")]

    state = make_root_state("1", tokens=tokens, top_assets=[{"address": "0xa", "rank": 1}])
    background = state["engine"]["background_state"]

    assert background["swaps_controller"]["tokens"] is tokens
    assert background["swaps_controller"]["top_assets"][0].address == "0xa"
    assert background["token_balances_controller"]["contract_balances"] is None

    coerced = make_root_state("1", tokens=[{"address": "0xb", "decimals": 18}])
    assert coerced["engine"]["background_state"]["swaps_controller"]["tokens"][0].decimals == 18


def test_relative_log_file_resolves_against_working_directory(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOG_FILE", "logs/x.log")

    assert Settings().log_path == tmp_path / "logs" / "x.log"


def test_initial_state_follows_configured_mainnet(monkeypatch, catalog, selectors, mainnet_tokens):
    monkeypatch.setenv("SWAPS_MAINNET_CHAIN_ID", "5")
    monkeypatch.setattr("swaps.settings.config.settings", Settings())

    assert make_initial_state().chain("5").is_live is True
    assert make_initial_state().chain("1") is None
    assert selectors.liveness(make_root_state("5")) is True
    assert selectors.liveness(make_root_state("1")) is False
    assert swaps_reducer(None, Action(type="@@INIT")).chain("5").is_live is True
    assert [token.name for token in add_metadata("5", mainnet_tokens, catalog)] == ["Dai Stablecoin", "Unlisted", "USD Coin"]
