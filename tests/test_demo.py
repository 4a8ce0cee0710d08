from checkout_core import demo
from checkout_core.interpolation import ManualClock, ManualFrameScheduler, start_interpolation


def test_run_frames_until_idle():
    scheduler = ManualFrameScheduler()
    clock = ManualClock()
    emitted = []
    start_interpolation(0, 10, 90, scheduler, clock, emitted.append)

    frames = demo.run_frames(scheduler, clock)
    assert frames == 6
    assert emitted[-1] == 10
    assert scheduler.pending == 0


def test_run_frames_respects_limit():
    scheduler = ManualFrameScheduler()
    clock = ManualClock()
    start_interpolation(0, 10, 1000, scheduler, clock)
    assert demo.run_frames(scheduler, clock, max_frames=3) == 3
    assert scheduler.pending == 1


def test_price_grid():
    grid = demo.price_grid()
    assert len(grid) == 20
    assert set(grid["coupon"]) == {"(none)", "WELCOME20", "SUMMER10", "FREESHIP"}
    freeship = grid[grid["coupon"] == "FREESHIP"].set_index("subtotal")
    assert freeship.loc[50.0, "shipping"] == 0
    assert freeship.loc[49.99, "shipping"] == 5.99


def test_main_runs(capsys):
    demo.main()
    out = capsys.readouterr().out
    assert "[main] Price grid:" in out
    assert "[main] Share text: Check out Wireless Headphones for $108.00!" in out
    assert "pending frames: 0" in out
