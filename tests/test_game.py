import pytest

from hatman.flags import Flags
from hatman.game import (
    BLACK,
    ESC_MENU_FADE,
    MAX_FRAME_TIME_MS,
    TRANSPARENT,
    ActiveLevel,
    ExitCode,
    Fade,
    Game,
    clamp_frame_time,
)
from hatman.saver import FIRST_LEVEL, FIRST_SPAWNPOINT, Saver


def _settle(game):
    game.update(game.transition_duration + 1)


@pytest.fixture
def saver(tmp_path):
    s = Saver(tmp_path / "save.json")
    s.create_new()
    return s


@pytest.fixture
def running(saver):
    game = Game(saver=saver, transition_duration=100)
    game.handle_requests()
    game.request_level_load_from_save()
    _settle(game)
    game.handle_requests()
    _settle(game)
    return game


def test_starts_in_main_menu():
    game = Game()
    assert game.handle_requests() is ExitCode.NONE
    assert game.gui.main_menu
    assert not game.is_running()
    assert game.gui.fade.start == BLACK
    assert game.gui.fade.end == TRANSPARENT


def test_load_from_save_waits_for_fade(saver):
    game = Game(saver=saver, transition_duration=100)
    game.handle_requests()
    game.request_level_load_from_save()
    assert game.gui.fade == Fade(TRANSPARENT, BLACK, 100)
    game.handle_requests()
    assert not game.is_running()
    _settle(game)
    game.handle_requests()
    assert game.level == ActiveLevel(FIRST_LEVEL, FIRST_SPAWNPOINT)
    assert not game.gui.main_menu
    assert game.gui.player_gui


def test_load_restores_flags(saver):
    saver.state_set_flags(["door_open"])
    flags = Flags()
    game = Game(saver=saver, flags=flags, transition_duration=10)
    game.handle_requests()
    game.request_level_load_from_save()
    _settle(game)
    game.handle_requests()
    assert flags.check("door_open")


def test_load_without_saver_raises():
    game = Game(transition_duration=10)
    game.handle_requests()
    game.request_level_load_from_save()
    _settle(game)
    with pytest.raises(RuntimeError):
        game.handle_requests()


def test_pause_freezes_level(running):
    running.request_toggle_esc_menu()
    running.handle_requests()
    assert running.paused and running.gui.esc_menu
    before = running.level.time
    running.update(20)
    assert running.level.time == before
    running.request_toggle_esc_menu()
    running.handle_requests()
    assert not running.paused and not running.gui.esc_menu


def test_inventory_toggle_pauses(running):
    running.request_toggle_inventory()
    running.handle_requests()
    assert running.gui.inventory
    assert running.paused


def test_timescale_scales_level_time(running):
    before = running.level.time
    running.timescale = 0.5
    running.update(10)
    assert running.level.time - before == pytest.approx(5.0)


def test_exit_codes():
    game = Game()
    game.request_exit_to_desktop()
    assert game.handle_requests() is ExitCode.EXIT
    game.request_exit_to_restart()
    assert game.handle_requests() is ExitCode.RESTART
    assert game.step(5) is ExitCode.RESTART


def test_level_change(running):
    running.request_level_change("crypt", (3.0, 4.0))
    running.request_level_change("other", (0.0, 0.0))
    assert not running.gui.player_gui
    _settle(running)
    running.handle_requests()
    assert running.level == ActiveLevel("crypt", (3.0, 4.0))
    assert running.gui.level_name
    assert running.gui.player_gui


def test_level_reload_uses_save(running):
    running.level.player_position = (1.0, 2.0)
    running.request_level_reload()
    _settle(running)
    running.handle_requests()
    assert running.level.player_position == FIRST_SPAWNPOINT
    assert not running.level_change_is_reload
    assert not running.gui.level_name


def test_back_to_main_menu(running):
    running.request_go_to_main_menu()
    assert running.gui.fade.start == ESC_MENU_FADE
    running.handle_requests()
    assert running.is_running()
    _settle(running)
    running.handle_requests()
    assert not running.is_running()
    assert running.gui.main_menu


def test_ending_screen_blocks_esc(running):
    running.request_go_to_ending_screen()
    running.request_toggle_esc_menu()
    running.update(running.ending_fade_duration + 1)
    running.handle_requests()
    assert running.gui.ending_screen
    assert not running.gui.esc_menu
    assert not running.is_running()


def test_f3_toggles_immediately():
    game = Game()
    game.request_toggle_f3()
    game.handle_requests()
    assert game.toggle_f3
    game.request_toggle_f3()
    game.handle_requests()
    assert not game.toggle_f3


def test_clamp_frame_time():
    assert clamp_frame_time(1000.0) == MAX_FRAME_TIME_MS
    assert clamp_frame_time(10.0, 40.0) == 10.0


def test_step_clamps_and_updates_emits():
    game = Game()
    game.emits.emit_add("signal", 0)
    assert game.step(1000.0) is ExitCode.NONE
    assert game.true_time_elapsed == MAX_FRAME_TIME_MS
    assert game.emits.emit_present("signal")