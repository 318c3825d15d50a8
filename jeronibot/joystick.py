"""Linux joystick input with per-button callbacks and a polling axis state."""

from __future__ import annotations

import argparse
import fcntl
import os
import struct
import sys
import threading
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from typing import Optional

from jeronibot.loop_rate import LoopRate

DEFAULT_DEVICE = "/dev/input/js0"

JS_EVENT_BUTTON = 0x01
JS_EVENT_AXIS = 0x02
JS_EVENT_INIT = 0x80

JSIOCGAXES = 0x80016A11
JSIOCGBUTTONS = 0x80016A12

_EVENT = struct.Struct("=IhBB")
_POLL_HZ = 60

ButtonCallback = Callable[[bool], object]


@dataclass(frozen=True)
class AxisState:
    """Position of a two-dimensional axis."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class JoystickEvent:
    """One event as delivered by the joystick device."""

    time: int
    value: int
    type: int
    number: int

    SIZE = _EVENT.size

    @classmethod
    def unpack(cls, raw: bytes) -> JoystickEvent:
        """Decode one raw event record."""
        if len(raw) != _EVENT.size:
            raise ValueError(f"joystick event must be {_EVENT.size} bytes, got {len(raw)}")
        return cls(*_EVENT.unpack(raw))


def _query_count(fd: int, request: int, name: str) -> int:
    buffer = bytearray(1)
    try:
        fcntl.ioctl(fd, request, buffer, True)
    except OSError as exc:
        raise RuntimeError(f"Joystick: ioctl ({name}) failed") from exc
    return buffer[0]


class Joystick:
    """A joystick device read on a background thread."""

    def __init__(self, device_name: str = DEFAULT_DEVICE) -> None:
        try:
            self._fd = os.open(device_name, os.O_RDONLY | os.O_NONBLOCK)
        except OSError as exc:
            raise RuntimeError("Joystick: Couldn't open joystick device") from exc
        try:
            self._num_axes = _query_count(self._fd, JSIOCGAXES, "JSIOCGAXES")
            self._num_buttons = _query_count(self._fd, JSIOCGBUTTONS, "JSIOCGBUTTONS")
        except RuntimeError:
            os.close(self._fd)
            raise

        self._axes = [AxisState() for _ in range(self._num_axes)]
        self._buttons: dict[int, Optional[ButtonCallback]] = {
            button: None for button in range(self._num_buttons)
        }
        self._stop = threading.Event()
        self._closed = False
        self._thread = threading.Thread(target=self._read_events, daemon=True)
        self._thread.start()

    @property
    def num_axes(self) -> int:
        """Number of axes the device reports."""
        return self._num_axes

    @property
    def num_buttons(self) -> int:
        """Number of buttons the device reports."""
        return self._num_buttons

    @property
    def closed(self) -> bool:
        """True once the device has been closed."""
        return self._closed

    def axis_state(self, axis: int) -> AxisState:
        """Return the current position of ``axis``; IndexError if out of range."""
        if not 0 <= axis < self._num_axes:
            raise IndexError("Joystick: get_axis_state: axis value out of range")
        return self._axes[axis]

    def set_button_callback(self, button: int, callback: Optional[ButtonCallback]) -> None:
        """Call ``callback(pressed)`` when ``button`` changes; IndexError if out of range."""
        if not 0 <= button < self._num_buttons:
            raise IndexError("Joystick: set_button_callback: button value out of range")
        self._buttons[button] = callback

    def handle_event(self, event: JoystickEvent) -> None:
        """Apply one device event to the axis state or button callbacks."""
        if event.type == JS_EVENT_BUTTON:
            callback = self._buttons.get(event.number)
            if callback is not None:
                callback(bool(event.value))
        elif event.type == JS_EVENT_AXIS:
            # Consecutive event numbers are the x and y of one axis.
            axis, is_y = divmod(event.number, 2)
            if axis < len(self._axes):
                current = self._axes[axis]
                self._axes[axis] = (
                    replace(current, y=event.value) if is_y else replace(current, x=event.value)
                )

    def _read_events(self) -> None:
        loop_rate = LoopRate(_POLL_HZ)
        while not self._stop.is_set():
            try:
                raw = os.read(self._fd, _EVENT.size)
            except (BlockingIOError, InterruptedError):
                raw = b""
            except OSError:
                break
            if len(raw) == _EVENT.size:
                self.handle_event(JoystickEvent.unpack(raw))
            loop_rate.sleep()

    def close(self) -> None:
        """Stop the input thread and release the device."""
        if self._closed:
            return
        self._closed = True
        self._stop.set()
        self._thread.join()
        os.close(self._fd)

    def __enter__(self) -> Joystick:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class XBox360Controller(Joystick):
    """Joystick with the button and axis numbering of an Xbox 360 controller."""

    BUTTON_A = 0
    BUTTON_B = 1
    BUTTON_X = 2
    BUTTON_Y = 3
    BUTTON_LEFT_SHOULDER = 4
    BUTTON_RIGHT_SHOULDER = 5
    BUTTON_BACK = 6
    BUTTON_START = 7
    BUTTON_XBOX = 8
    BUTTON_LEFT_THUMBSTICK = 9
    BUTTON_RIGHT_THUMBSTICK = 10

    AXIS_LEFT_THUMBSTICK = 0
    AXIS_RIGHT_THUMBSTICK = 1
    AXIS_TRIGGERS = 2
    AXIS_DIGIPAD = 3

    def __init__(self, device_name: str = DEFAULT_DEVICE) -> None:
        super().__init__(device_name)


def _report_button(name: str) -> ButtonCallback:
    def report(pressed: bool) -> None:
        print(f"Button {name}: {int(pressed)}", flush=True)

    return report


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print controller axis positions at 30 Hz until interrupted."""
    parser = argparse.ArgumentParser(description="Show Xbox 360 controller input.")
    parser.add_argument("device", nargs="?", default=DEFAULT_DEVICE, help="joystick device")
    args = parser.parse_args(argv)

    try:
        with XBox360Controller(args.device) as controller:
            loop_rate = LoopRate(30)
            controller.set_button_callback(XBox360Controller.BUTTON_X, _report_button("X"))
            controller.set_button_callback(XBox360Controller.BUTTON_B, _report_button("B"))
            try:
                while True:
                    for axis in range(controller.num_axes):
                        state = controller.axis_state(axis)
                        print(f"x_{axis},y_{axis}: {state.x},{state.y}")
                    print(flush=True)
                    loop_rate.sleep()
            except KeyboardInterrupt:
                pass
    except (RuntimeError, IndexError, OSError) as exc:
        print(f"Exception: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())