from hatman.launch_info import LaunchInfo, WindowMode


def test_set_window_stores_values():
    info = LaunchInfo()
    info.set_window(1280, 720, WindowMode.FULLSCREEN)
    assert (info.window_width, info.window_height) == (1280, 720)
    assert info.window_flag is WindowMode.FULLSCREEN


def test_set_window_overwrites():
    info = LaunchInfo(640, 360, WindowMode.BORDERLESS)
    info.set_window(800, 600, WindowMode.WINDOW)
    assert info == LaunchInfo(800, 600, WindowMode.WINDOW)


def test_window_mode_from_name():
    assert WindowMode("BORDERLESS") is WindowMode.BORDERLESS