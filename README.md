# gadgetkit

Small building blocks for programs that talk to sensors, displays and
memory chips, along with the numeric helpers such programs tend to need.

No part of the package opens a bus itself. Each driver is given the
transport it needs when you create it:

- an I2C bus object with `write(address, data)` and `read(address, count)`
- an SPI transfer callable
- a serial object with `write`, `read` and `in_waiting`
- a function that returns an ADC reading

That object is what talks to the real hardware, so a small fake serves
just as well in tests.

## Installation

```
pip install gadgetkit
```

To install and run the test suite:

```
pip install "gadgetkit[test]"
pytest
```

## Contents

### Numeric helpers

- `gadgetkit.angle`: `Angle` holds an angle as degrees, minutes, seconds and
  ten-thousandths of a second. You can build one with `Angle.from_float`,
  `Angle.parse` or `Angle.from_radians`. It supports `+`, `-`, `*`, `/` and
  comparisons. It can be formatted to a chosen precision with `AngleFormat`.
- `gadgetkit.average_angle`: `AverageAngle` gives the vector average of
  angles in degrees or radians (`AngleType`). An optional length weights
  each angle.
- `gadgetkit.fastmap`: `FastMap` is a linear mapping from one range to
  another. It offers `map`, `back` and constrained variants.
- `gadgetkit.distance_table`: `DistanceTable` is a symmetric distance matrix
  that stores only its lower triangle.
- `gadgetkit.countdown`: `CountDown` is a countdown timer with millisecond,
  microsecond or second resolution (`Resolution`). You supply the clock.
- `gadgetkit.fraction`: `Fraction` is a simplified fraction whose
  denominator is kept at 10000 or below. `Fraction.from_float` approximates
  a float.
- `gadgetkit.complex_number`: `Complex` is an immutable complex number with
  powers, logarithms, and the trigonometric and hyperbolic functions and
  their inverses.
- `gadgetkit.bit_array`: `BitArray` is a packed array of 1 to 32 bit
  elements.
- `gadgetkit.bool_array`: `BoolArray` is a packed array of up to 2000
  booleans.
- `gadgetkit.histogram`: `Histogram` counts values in buckets over fixed
  bounds. It provides `frequency`, `pmf`, `cdf` and `val`.

### Input helpers

- `gadgetkit.analog_keypad`: `AnalogKeypad` and `key_from_adc` decode a 4x4
  resistor-ladder keypad read through one ADC. `AnalogKeypad.event` reports
  `KeyEvent` values.
- `gadgetkit.analog_pin`: `AnalogPin` reads an ADC with noise suppression
  and exponential smoothing.

### Device drivers

- `gadgetkit.am232x`: `AM232X` drives an AM2320-family humidity and
  temperature sensor. It checks each reply's CRC (`crc16`) and raises
  `AM232XError` with an `AM232XErrorCode`.
- `gadgetkit.dht12`: `DHT12` drives an I2C humidity and temperature sensor.
  It raises `DHT12ChecksumError`, `DHT12ConnectError` or
  `DHT12MissingBytesError`.
- `gadgetkit.ad524x`: `AD524X` drives a two-wiper I2C digital potentiometer
  with two output lines.
- `gadgetkit.max31855`: `MAX31855` decodes thermocouple converter words. It
  reports fault bits as `Status` and has an adjustable offset and
  thermocouple factor (`E_TC`, `J_TC`, `K_TC` and the others).
- `gadgetkit.ht16k33`: `HT16K33` drives a four-digit seven-segment display.
  It shows integers, hex, time, floats, raw segments and VU bars.
- `gadgetkit.dac8554`: `DAC8554` drives a four-channel 16-bit DAC over SPI,
  with power-down modes (`PowerDown`).
- `gadgetkit.fram`: `FRAM` drives I2C ferroelectric memory. It detects the
  chip size from the device id.
- `gadgetkit.cozir`: `Cozir` drives a CO2 sensor on a serial line
  (`OperatingMode`, `OutputField`). `parse_reply` decodes its answers.
- `gadgetkit.i2c_eeprom`: `I2CEeprom` drives a 24LC-series EEPROM. It splits
  writes at page boundaries and raises `EepromError`.

## Examples

```python
from gadgetkit.angle import Angle

a = Angle(10, 30, 0, 0)
b = Angle.parse("-1.25")
print(a + b)              # 9.15'00"0000
print(round(float(a), 6)) # 10.5
```

```python
from gadgetkit.fraction import Fraction

f = Fraction.from_float(0.75)
print(f)                         # 3/4
print(f + Fraction(1, 4))        # 1/1
```

```python
from gadgetkit.histogram import Histogram

h = Histogram([0.0, 10.0, 20.0])
for v in (1, 5, 12, 25):
    h.add(v)
print(h.bucket(1), h.cdf(12))    # 2 0.75
```

```python
from gadgetkit.fastmap import FastMap

c_to_f = FastMap(0, 100, 32, 212)
print(c_to_f.map(37))              # about 98.6
print(c_to_f.constrained_map(150)) # 212
```

This example uses a fake I2C bus:

```python
from gadgetkit.dht12 import DHT12

class FakeBus:
    def write(self, address, data):
        pass

    def read(self, address, count):
        data = [50, 5, 23, 4]
        return bytes(data + [sum(data) & 0xFF])

sensor = DHT12(FakeBus())
humidity, temperature = sensor.read()   # about 50.5 and 23.4
```

## Errors

When a driver exchange fails, the driver raises an exception rather than
returning a status code. Examples are `AM232XError`, `DHT12ChecksumError`
and `EepromError`. An argument out of range raises `ValueError` or, for
`AD524X`, its subclass `AD524XError`.

`MAX31855.read` is the exception. Thermocouple faults are readings rather
than failures of the exchange, so it returns the `Status` bits instead of
raising.

## What the package does not do

- It has no command-line tool.
- It provides no I2C, SPI, serial or ADC implementations. The transports
  must come from elsewhere, for example an I2C library for your platform,
  pyserial, or a fake in tests.