import pytest

from drumkit.models import KitPreset, PresetChannel, PresetControl, PresetInstrument, PresetLayer
from drumkit.validation import (
    MultiValidationError,
    ValidationError,
    validate_control,
    validate_layer,
    validate_preset,
)


def vol(cc=0):
    return PresetControl(type="volume", midi_cc=cc)


def pan(cc=0):
    return PresetControl(type="pan", midi_cc=cc)


def top_layer():
    return {"top": PresetLayer(controls={"volume": vol(123)})}


@pytest.mark.parametrize("type_, want_err", [("volume", False), ("level", True)])
def test_validate_control(type_, want_err):
    control = PresetControl(type=type_)
    if want_err:
        with pytest.raises(MultiValidationError) as info:
            validate_control(control)
        assert info.value.errors == [ValidationError("type", "unknown value 'level'")]
        assert str(info.value) == "type: unknown value 'level'"
    else:
        assert validate_control(control) is None


@pytest.mark.parametrize(
    "controls, want_err",
    [
        ({"volume": vol(123), "pan": pan(134)}, False),
        ({"volume": vol(123)}, False),
        ({"volume": vol(123), "pan": pan()}, True),
        ({}, True),
        ({"volume": vol()}, True),
    ],
)
def test_validate_layer(controls, want_err):
    layer = PresetLayer(controls=controls)
    if want_err:
        with pytest.raises(MultiValidationError):
            validate_layer(layer)
    else:
        assert validate_layer(layer) is None


def test_validate_layer_messages():
    with pytest.raises(MultiValidationError) as info:
        validate_layer(PresetLayer(controls={}))
    assert info.value.errors == [ValidationError(" ", "missing 'volume' control")]

    with pytest.raises(MultiValidationError) as info:
        validate_layer(PresetLayer(controls={"volume": vol(123), "pan": pan()}))
    assert info.value.errors == [
        ValidationError("control 'pan'", "midiCC is required and can't be 0")
    ]


def one(**kwargs):
    return [PresetInstrument(channel_key="1", **kwargs)]


PRESET_CASES = [
    ("one, no layers, vol with cc", one(controls={"volume": vol(123)}), False),
    ("one, no layers, vol without cc", one(controls={"volume": vol()}), True),
    ("one, no layers, no vol", one(), False),
    ("one, layers, vol with cc", one(controls={"volume": vol(123)}, layers=top_layer()), False),
    ("one, layers, vol without cc", one(controls={"volume": vol()}, layers=top_layer()), False),
    ("one, layers, no vol", one(controls={}, layers=top_layer()), False),
    (
        "many, no layers, vol with cc",
        [
            PresetInstrument(channel_key="1", name="tom1", controls={"volume": vol(123), "pan": pan(123)}),
            PresetInstrument(channel_key="1", name="tom2", controls={"volume": vol(123), "pan": pan(123)}),
        ],
        False,
    ),
    (
        "many, no layers, vol without cc",
        [
            PresetInstrument(channel_key="1", name="tom1", controls={"volume": vol(), "pan": pan(123)}),
            PresetInstrument(channel_key="1", name="tom2", controls={"volume": vol(123), "pan": pan()}),
        ],
        True,
    ),
    (
        "many, no layers, no vol",
        [
            PresetInstrument(channel_key="1", name="tom1", controls={"pan": pan(123)}),
            PresetInstrument(channel_key="1", name="tom2", controls={"volume": vol(123)}),
        ],
        True,
    ),
    (
        "many, layers, vol with cc",
        [
            PresetInstrument(channel_key="1", name="tom1", controls={"volume": vol(123), "pan": pan(123)}, layers=top_layer()),
            PresetInstrument(channel_key="1", name="tom2", controls={"volume": vol(123), "pan": pan(123)}),
        ],
        False,
    ),
    (
        "many, layers, vol without cc",
        [
            PresetInstrument(channel_key="1", name="tom1", controls={"volume": vol(), "pan": pan(123)}, layers=top_layer()),
            PresetInstrument(channel_key="1", name="tom2", controls={"volume": vol(123), "pan": pan(123)}),
        ],
        False,
    ),
    (
        "many, layers, no vol",
        [
            PresetInstrument(channel_key="1", name="tom1", controls={"pan": pan(123)}, layers=top_layer()),
            PresetInstrument(channel_key="1", name="tom2", controls={"volume": vol(123), "pan": pan(123)}),
        ],
        False,
    ),
]


@pytest.mark.parametrize("name, instruments, want_err", PRESET_CASES, ids=[c[0] for c in PRESET_CASES])
def test_validate_preset(name, instruments, want_err):
    preset = KitPreset(channels=[PresetChannel(key="1")], instruments=instruments)
    if want_err:
        with pytest.raises(MultiValidationError):
            validate_preset(preset)
    else:
        assert validate_preset(preset) is None


def test_validate_preset_missing_controls_messages():
    preset = KitPreset(
        channels=[PresetChannel(key="1")],
        instruments=[
            PresetInstrument(channel_key="1", name="tom1", controls={"pan": pan(123)}),
            PresetInstrument(channel_key="1", name="tom2", controls={"volume": vol(123)}),
        ],
    )
    with pytest.raises(MultiValidationError) as info:
        validate_preset(preset)
    assert info.value.errors == [
        ValidationError("instrument control 'tom1.volume'", "is required, but missing"),
        ValidationError("instrument control 'tom2.pan'", "is required, but missing"),
    ]


def test_validate_preset_missing_channel():
    preset = KitPreset(
        channels=[PresetChannel(key="a")],
        instruments=[PresetInstrument(name="A", channel_key="x")],
    )
    with pytest.raises(MultiValidationError) as info:
        validate_preset(preset)
    assert [e.field for e in info.value.errors] == ["preset"]
    assert "missing channel 'x'" in info.value.errors[0].message


def test_validate_preset_wraps_layer_errors():
    preset = KitPreset(
        channels=[PresetChannel(key="1")],
        instruments=one(layers={"top": PresetLayer(controls={})}),
    )
    with pytest.raises(MultiValidationError) as info:
        validate_preset(preset)
    assert info.value.errors == [
        ValidationError("layer 'top'", " : missing 'volume' control")
    ]


def test_validate_preset_unknown_channel_control_type():
    preset = KitPreset(
        channels=[PresetChannel(key="1", controls={"x": PresetControl(type="level")})],
    )
    with pytest.raises(MultiValidationError) as info:
        validate_preset(preset)
    assert info.value.errors == [ValidationError("type", "unknown value 'level'")]