# jeronibot

Building blocks for driving a miniPRO from a game controller on Linux:

- `jeronibot.packet` holds the miniPRO command packets `Packet`, `Drive`,
  `EnterRemoteControlMode` and `ExitRemoteControlMode`, each with its header,
  length and checksum. It also has the enums `PacketType`, `Operation` and
  `Parameter`.
- `jeronibot.joystick` has `Joystick`, which reads a Linux joystick device such
  as `/dev/input/js0` on a background thread. `XBox360Controller` adds the
  button and axis numbers of an Xbox 360 pad. `AxisState` and `JoystickEvent`
  are the value types it uses.
- `jeronibot.loop_rate` has `LoopRate`, which keeps a loop running at a fixed
  frequency.
- `jeronibot.uuid` has `BtUuid`, which holds 16-, 32- and 128-bit Bluetooth
  UUIDs. It parses them, formats them, compares them and turns them into
  little-endian bytes. `uuid_strcmp` compares two UUID strings without regard
  to case.
- `jeronibot.att` has the ATT opcodes, `AttError` codes, permission and
  property flags, and `error_to_string`, which gives each ATT error code a
  readable text.
- `jeronibot.queue` has `Queue`, a small ordered queue with find and remove
  helpers.
- `jeronibot.byteutil` has little- and big-endian integer packing, hex dumps,
  `debug` message formatting and bitmap id allocation (`get_uid`, `clear_uid`).

The package uses only the standard library. It needs Python 3.10 or later.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building packets

```python
from jeronibot.packet import Drive, EnterRemoteControlMode, ExitRemoteControlMode

EnterRemoteControlMode().to_bytes()
# b'\x55\xaa\x04\x0a\x03\x7a\x01\x00\x73\xff'

Drive(1000, -500).to_bytes()
bytes(ExitRemoteControlMode())
```

Every packet starts with the header `55 aa`. Then come the length, the type,
the operation, the parameter and the payload. A 16-bit checksum ends the packet,
low byte first. `Drive` packs throttle and steering as two 16-bit values, low
byte first. Values that do not fit raise `ValueError`.

## Reading a controller

```python
from jeronibot.joystick import XBox360Controller
from jeronibot.loop_rate import LoopRate

with XBox360Controller("/dev/input/js0") as pad:
    pad.set_button_callback(XBox360Controller.BUTTON_X, lambda pressed: print("X", pressed))
    rate = LoopRate(30)
    while True:
        state = pad.axis_state(XBox360Controller.AXIS_LEFT_THUMBSTICK)
        print(state.x, state.y)
        rate.sleep()
```

`num_axes` and `num_buttons` give what the device reports. Asking for an axis
or a button that the device does not have raises `IndexError`. A device that
cannot be opened or queried raises `RuntimeError`.

The package also installs a command that prints the axis states of a
controller until you interrupt it with Ctrl+C. It reads `/dev/input/js0`
unless you give another device:

```
jeronibot-joystick
jeronibot-joystick /dev/input/js1
```

## Bluetooth UUIDs

```python
from jeronibot.uuid import BtUuid

battery = BtUuid.from_string("0000180f-0000-1000-8000-00805f9b34fb")
str(battery)                 # '180f'
str(battery.to_uuid128())    # '0000180f-0000-1000-8000-00805f9b34fb'
battery.compare(BtUuid.uuid16(0x180F))  # 0
```

## What the package does not do

The package builds miniPRO packets but does not send them. It has no
Bluetooth connection or GATT client, so it cannot talk to a drive base by
itself. Getting the packet bytes to the device is up to your own Bluetooth
code.