import json

import pytest
from inventory_metrics.config import set_config_for_test
from inventory_metrics.logging import get_logger


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    set_config_for_test(log_level="WARNING")
    get_logger()


def test_json_lines_carry_component(capsys):
    set_config_for_test(log_level="INFO", log_json=True)
    get_logger("inventory.tests").info("loaded 3 products")

    line = capsys.readouterr().err.strip().splitlines()[-1]
    record = json.loads(line)["record"]
    assert record["message"] == "loaded 3 products"
    assert record["level"]["name"] == "INFO"
    assert record["extra"]["component"] == "inventory.tests"

def test_messages_below_level_are_dropped(capsys):
    set_config_for_test(log_level="ERROR")
    log = get_logger("inventory.quiet")
    log.warning("skipping record")
    log.error("write failed")

    err = capsys.readouterr().err
    assert "skipping record" not in err
    assert "write failed" in err
    assert "inventory.quiet:" in err

def test_unnamed_logger_uses_default_component(capsys):
    set_config_for_test(log_level="INFO", log_json=True)
    get_logger().info("plain")

    record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])["record"]
    assert record["extra"]["component"] == "inventory_metrics"

def test_file_sink_writes_json_lines(tmp_path):
    """Test the file handler is added from LOG_FILE and dropped when the setting goes away."""
    log_file = tmp_path / "inventory.log"
    set_config_for_test(log_level="DEBUG", log_file=str(log_file))
    get_logger("inventory.file").debug("rewrote products.json")

    # changing settings rebuilds the handlers, which closes the file
    set_config_for_test(log_level="WARNING")
    get_logger("inventory.file").warning("after file handler removed")

    records = [json.loads(line)["record"] for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert [r["message"] for r in records] == ["rewrote products.json"]
    assert records[0]["extra"]["component"] == "inventory.file"
