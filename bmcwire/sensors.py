"""Enumerations describing sensors and the readings they provide."""

from __future__ import annotations

from datetime import timedelta

from bmcwire.codes import _OpenIntEnum


class RateUnit(_OpenIntEnum):
    """The period over which a sensor's base unit is given."""

    NONE = 0
    PER_MICROSECOND = 1
    PER_MILLISECOND = 2
    PER_SECOND = 3
    PER_MINUTE = 4
    PER_HOUR = 5
    PER_DAY = 6

    def duration(self) -> timedelta:
        """The "per" period of the unit; zero if the unit is not recognised."""
        return _RATE_UNIT_DURATIONS.get(int(self), timedelta(0))

    def __str__(self) -> str:
        formatted = _RATE_UNIT_FORMATTED.get(int(self), "None")
        return f"{int(self):#x}({formatted})"


_RATE_UNIT_DURATIONS = {
    1: timedelta(microseconds=1),
    2: timedelta(milliseconds=1),
    3: timedelta(seconds=1),
    4: timedelta(minutes=1),
    5: timedelta(hours=1),
    6: timedelta(hours=24),
}

_RATE_UNIT_FORMATTED = {
    1: "1\u00b5s",
    2: "1ms",
    3: "1s",
    4: "1m0s",
    5: "1h0m0s",
    6: "24h0m0s",
}


class SensorDirection(_OpenIntEnum):
    """Whether a sensor monitors an input or an output of its entity."""

    UNSPECIFIED = 0
    INPUT = 1
    OUTPUT = 2

    def description(self) -> str:
        """A human-readable description of the direction."""
        return _SENSOR_DIRECTION_DESCRIPTIONS.get(int(self), "Unknown")

    def __str__(self) -> str:
        return f"{int(self):#x}({self.description()})"


_SENSOR_DIRECTION_DESCRIPTIONS = {
    0: "Unspecified/not applicable",
    1: "Input",
    2: "Output",
}


class SensorType(_OpenIntEnum):
    """What a sensor measures."""

    TEMPERATURE = 0x01
    VOLTAGE = 0x02
    CURRENT = 0x03
    FAN = 0x04
    PHYSICAL_SECURITY = 0x05
    PLATFORM_SECURITY = 0x06
    PROCESSOR = 0x07
    POWER_SUPPLY = 0x08
    POWER_UNIT = 0x09
    COOLING_DEVICE = 0x0A
    OTHER_UNITS_BASED_SENSOR = 0x0B
    MEMORY = 0x0C
    DRIVE_BAY = 0x0D

    def description(self) -> str:
        """A human-readable description of the sensor type."""
        return _SENSOR_TYPE_DESCRIPTIONS.get(int(self), "Unknown")

    def __str__(self) -> str:
        return f"{int(self):#x}({self.description()})"


_SENSOR_TYPE_DESCRIPTIONS = {
    0x01: "Temperature",
    0x02: "Voltage",
    0x03: "Current",
    0x04: "Fan",
    0x05: "Physical Security",
    0x06: "Platform Security",
    0x07: "Processor",
    0x08: "Power Supply",
    0x09: "Power Unit",
    0x0A: "Cooling Device",
    0x0B: "Other Units-based Sensor",
    0x0C: "Memory",
    0x0D: "Drive Bay",
}


class SensorUnit(_OpenIntEnum):
    """The unit a sensor's readings are expressed in."""

    CELSIUS = 1
    FAHRENHEIT = 2
    KELVIN = 3
    VOLTS = 4
    AMPS = 5
    WATTS = 6
    JOULES = 7
    COULOMBS = 8
    VOLTAMPERES = 9
    NITS = 10
    LUMEN = 11
    LUX = 12
    CANDELA = 13
    KILOPASCALS = 14
    POUNDS_PER_SQUARE_INCH = 15
    NEWTONS = 16
    CUBIC_FEET_PER_MINUTE = 17
    ROTATIONS_PER_MINUTE = 18
    HERTZ = 19
    MICROSECONDS = 20
    MILLISECONDS = 21
    SECONDS = 22
    MINUTES = 23
    HOURS = 24
    DAYS = 25
    WEEKS = 26
    MILS = 27
    INCHES = 28
    FEET = 29
    CUBIC_INCHES = 30
    CUBIC_FEET = 31
    MILLIMETERS = 32
    CENTIMETERS = 33
    METERS = 34
    CUBIC_CENTIMETERS = 35
    CUBIC_METERS = 36
    LITERS = 37
    FLUID_OUNCES = 38
    RADIANS = 39
    STERADIANS = 40
    REVOLUTIONS = 41
    CYCLES = 42
    GRAVITIES = 43
    OUNCES = 44
    POUNDS = 45
    FEET_POUNDS = 46
    OUNCE_INCHES = 47
    GAUSS = 48
    GILBERTS = 49
    HENRY = 50
    MILLIHENRY = 51
    FARAD = 52
    MICROFARAD = 53
    OHMS = 54
    SIEMENS = 55
    MOLES = 56
    BECQUEREL = 57
    PARTS_PER_MILLION = 58
    DECIBELS = 60
    DECIBELS_A_FILTER = 61
    DECIBELS_C_FILTER = 62
    GRAY = 63
    SIEVERTS = 64
    COLOR_TEMP_KELVIN = 65
    BITS = 66
    KILOBITS = 67
    MEGABITS = 68
    GIGABITS = 69
    BYTES = 70
    KILOBYTES = 71
    MEGABYTES = 72
    GIGABYTES = 73
    WORDS = 74
    DWORDS = 75
    QWORDS = 76
    MEMORY_LINES = 77
    HITS = 78
    MISSES = 79
    RETRIES = 80
    RESETS = 81
    OVERFLOWS = 82
    UNDERRUNS = 83
    COLLISIONS = 84
    PACKETS = 85
    MESSAGES = 86
    CHARACTERS = 87
    ERRORS = 88
    CORRECTABLE_ERRORS = 89
    UNCORRECTABLE_ERRORS = 90
    FATAL = 91
    GRAMS = 92

    def symbol(self) -> str:
        """The conventional symbol for the unit."""
        if int(self) == 0:
            return "Unspecified/Unused"
        return _SENSOR_UNIT_SYMBOLS.get(int(self), "Unknown")

    def __str__(self) -> str:
        return f"{int(self):#x}({self.symbol()})"


_SENSOR_UNIT_SYMBOLS = {
    SensorUnit.CELSIUS: "C",
    SensorUnit.FAHRENHEIT: "F",
    SensorUnit.KELVIN: "K",
    SensorUnit.VOLTS: "V",
    SensorUnit.AMPS: "A",
    SensorUnit.WATTS: "W",
    SensorUnit.JOULES: "J",
    SensorUnit.COULOMBS: "C",
    SensorUnit.VOLTAMPERES: "VA",
    SensorUnit.NITS: "nt",
    SensorUnit.LUMEN: "lm",
    SensorUnit.LUX: "lx",
    SensorUnit.CANDELA: "cd",
    SensorUnit.KILOPASCALS: "kPa",
    SensorUnit.POUNDS_PER_SQUARE_INCH: "psi",
    SensorUnit.NEWTONS: "nt",
    SensorUnit.CUBIC_FEET_PER_MINUTE: "CFM",
    SensorUnit.ROTATIONS_PER_MINUTE: "RPM",
    SensorUnit.HERTZ: "Hz",
    SensorUnit.MICROSECONDS: "\u03bcs",
    SensorUnit.MILLISECONDS: "ms",
    SensorUnit.SECONDS: "s",
    SensorUnit.MINUTES: "min",
    SensorUnit.HOURS: "hr",
    SensorUnit.DAYS: "d",
    SensorUnit.WEEKS: "w",
    SensorUnit.MILS: "mil",
    SensorUnit.INCHES: "in",
    SensorUnit.FEET: "ft",
    SensorUnit.CUBIC_INCHES: "in\u00b3",
    SensorUnit.CUBIC_FEET: "ft\u00b3",
    SensorUnit.MILLIMETERS: "mm",
    SensorUnit.CENTIMETERS: "cm",
    SensorUnit.METERS: "m",
    SensorUnit.CUBIC_CENTIMETERS: "cm\u00b3",
    SensorUnit.CUBIC_METERS: "m\u00b3",
    SensorUnit.LITERS: "l",
    SensorUnit.FLUID_OUNCES: "fl oz",
    SensorUnit.RADIANS: "rad",
    SensorUnit.STERADIANS: "sr",
    SensorUnit.REVOLUTIONS: "rev",
    SensorUnit.CYCLES: "Hz",
    SensorUnit.GRAVITIES: "g",
    SensorUnit.OUNCES: "oz",
    SensorUnit.POUNDS: "lb",
    SensorUnit.FEET_POUNDS: "ft-lb",
    SensorUnit.OUNCE_INCHES: "oz-in",
    SensorUnit.GAUSS: "G",
    SensorUnit.GILBERTS: "Gb",
    SensorUnit.HENRY: "H",
    SensorUnit.MILLIHENRY: "mH",
    SensorUnit.FARAD: "F",
    SensorUnit.MICROFARAD: "\u03bcF",
    SensorUnit.OHMS: "\u03a9",
    SensorUnit.SIEMENS: "\u03a9\u207b\u00b9",
    SensorUnit.MOLES: "mol",
    SensorUnit.BECQUEREL: "Bq",
    SensorUnit.PARTS_PER_MILLION: "ppm",
    SensorUnit.DECIBELS: "dB",
    SensorUnit.DECIBELS_A_FILTER: "dBA",
    SensorUnit.DECIBELS_C_FILTER: "dBC",
    SensorUnit.GRAY: "Gy",
    SensorUnit.SIEVERTS: "Sv",
    SensorUnit.COLOR_TEMP_KELVIN: "ColorK",
    SensorUnit.BITS: "b",
    SensorUnit.KILOBITS: "Kb",
    SensorUnit.MEGABITS: "Mb",
    SensorUnit.GIGABITS: "Gb",
    SensorUnit.BYTES: "B",
    SensorUnit.KILOBYTES: "KB",
    SensorUnit.MEGABYTES: "MB",
    SensorUnit.GIGABYTES: "GB",
    SensorUnit.WORDS: "word",
    SensorUnit.DWORDS: "dword",
    SensorUnit.QWORDS: "qword",
    SensorUnit.MEMORY_LINES: "memory line",
    SensorUnit.HITS: "hit",
    SensorUnit.MISSES: "miss",
    SensorUnit.RETRIES: "retry",
    SensorUnit.RESETS: "reset",
    SensorUnit.OVERFLOWS: "overflow",
    SensorUnit.UNDERRUNS: "underrun",
    SensorUnit.COLLISIONS: "collision",
    SensorUnit.PACKETS: "pkt",
    SensorUnit.MESSAGES: "msg",
    SensorUnit.CHARACTERS: "char",
    SensorUnit.ERRORS: "err",
    SensorUnit.CORRECTABLE_ERRORS: "correctable err",
    SensorUnit.UNCORRECTABLE_ERRORS: "uncorrectable err",
    SensorUnit.FATAL: "fatal",
    SensorUnit.GRAMS: "g",
}


class OutputType(_OpenIntEnum):
    """Event/Reading Type Code, indicating the kind of reading a sensor gives."""

    THRESHOLD = 1

    def description(self) -> str:
        """A human-readable description of the output type."""
        return _OUTPUT_TYPE_DESCRIPTIONS.get(int(self), "Unknown")

    def __str__(self) -> str:
        return f"{int(self):#x}({self.description()})"


_OUTPUT_TYPE_DESCRIPTIONS = {
    1: "Threshold",
}