"""
Shared fixtures for the GMK writer tests.
"""
import pytest

from gmkwriter.data_types import GameVersion, GmkProject, Settings, Trigger, TriggerMoment


@pytest.fixture
def sample_trigger():
    return Trigger(name="T1", condition="x>0", moment=TriggerMoment.BEGIN_STEP, constant_name="C")


@pytest.fixture
def custom_settings():
    """Settings exercising every optional payload."""
    return Settings(
        fullscreen=True,
        scaling=-1,
        clear_colour=0x00FF8040,
        priority=2,
        loading_bar=2,
        backdata=b"BACK" * 50,
        frontdata=b"FRONT",
        custom_load_image=b"\x89PNG\x00\x01splash",
        translucency=200,
        zero_uninitialized_vars=True,
        error_on_uninitialized_args=True,
    )


@pytest.fixture
def sample_project(sample_trigger, custom_settings):
    return GmkProject(
        version=GameVersion.GAMEMAKER_8_1,
        game_id=424242,
        guid=bytes(range(16)),
        settings=custom_settings,
        icon=b"\x00\x00\x01\x00icon-bytes",
        triggers=[None, sample_trigger, None],
    )
