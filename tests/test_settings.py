# tests/test_settings.py
import importlib.util
from pathlib import Path

from healthsync.config import settings as settings_module

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "setup_api_keys.py"


def load_setup_script():
    spec = importlib.util.spec_from_file_location("setup_api_keys", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_settings_read_the_file_the_key_script_writes():
    script = load_setup_script()
    written = (script.repo_dir / script.env_file).resolve()

    read = [Path(f).resolve() for f in settings_module.Settings.model_config["env_file"]]

    assert written in read
    # not only relative to the working directory
    assert any(f.is_absolute() for f in map(Path, settings_module.Settings.model_config["env_file"]))


def test_missing_provider_keys_do_not_block_settings():
    assert not settings_module.settings.huggingface_api_key
    assert not settings_module.settings.openai_api_key
