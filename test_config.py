"""
Test configuration loading and validation.
"""
import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from configs.config import Config


def test_defaults():
    config = Config()
    assert config.accent.style == 'classic'
    assert config.accent.remove_mode == 'remove'
    assert config.accent.strict is False
    assert config.normalizer.steps == ['unicode', 'fix_accent', 'fix_i_or_y']
    assert config.normalizer.unicode_form == 'NFC'
    assert config.logging.level == 'INFO'
    assert config.logging.output is None


def test_load_default_yaml():
    config_path = project_root / "configs" / "default.yaml"
    config = Config.from_yaml(config_path)
    assert config.model_dump() == Config().model_dump()


def test_save_and_reload(tmp_path):
    config = Config(accent={'style': 'modern', 'remove_mode': 'alphabet'})
    config.normalizer.steps = ['fix_accent', 'format_name']

    output_path = tmp_path / "nested" / "config.yaml"
    config.save_yaml(output_path)
    assert output_path.exists()

    reloaded = Config.from_yaml(output_path)
    assert reloaded.accent.style == 'modern'
    assert reloaded.accent.remove_mode == 'alphabet'
    assert reloaded.normalizer.steps == ['fix_accent', 'format_name']


def test_empty_yaml(tmp_path):
    config_path = tmp_path / "empty.yaml"
    config_path.write_text("", encoding="utf-8")
    assert Config.from_yaml(config_path).model_dump() == Config().model_dump()


def test_partial_yaml(tmp_path):
    config_path = tmp_path / "partial.yaml"
    config_path.write_text("accent:\n  style: modern\n", encoding="utf-8")
    config = Config.from_yaml(config_path)
    assert config.accent.style == 'modern'
    assert config.accent.remove_mode == 'remove'


def test_missing_file():
    with pytest.raises(FileNotFoundError):
        Config.from_yaml(project_root / "configs" / "missing.yaml")


def test_invalid_values():
    with pytest.raises(ValidationError):
        Config(normalizer={'steps': ['spell_check']})
    with pytest.raises(ValidationError):
        Config(normalizer={'steps': ['fix_accent', 'fix_accent']})
    with pytest.raises(ValidationError):
        Config(accent={'style': 'new'})
    with pytest.raises(ValidationError):
        Config(accent={'remove_mode': 'ascii'})
    with pytest.raises(ValidationError):
        Config(logging={'level': 'VERBOSE'})


def test_unknown_section():
    with pytest.raises(ValidationError):
        Config(normaliser={'steps': ['unicode']})


def test_get_dot_notation():
    config = Config()
    assert config.get('accent.style') == 'classic'
    assert config.get('normalizer.unicode_form') == 'NFC'
    assert config.get('accent.missing', 'fallback') == 'fallback'
    assert config.get('missing') is None
