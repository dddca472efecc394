# drumkit

Models and tools for drum kit presets played through a software sampler.

A preset (`KitPreset`) groups instruments (`PresetInstrument`) into mixer
channels (`PresetChannel`). Instruments may have layers (`PresetLayer`), and
every channel, instrument and layer carries controls (`PresetControl`) such as
volume, pan and pitch.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## What it offers

- `drumkit.models` holds the data model: `Kit`, `Instrument`, `Layer`,
  `Control`, `KitPreset` and its parts, and the `ControlType` enum
  (`volume`, `pan`, `pitch`, `other`).
  `KitPreset.prepare_to_load(midi_devices)` copies sampler keys (`cfg_key`,
  `cfg_midi_key`) from the referenced instruments, resolves MIDI key names to
  note numbers with `map_midi_key`, and builds an index of every control,
  available through the `KitPreset.controls` property (keys such as `c0`,
  `i1`, `l2` for channel, instrument and layer controls).
  `KitPreset.channel_instruments_by_key(key)` and
  `channel_instruments_by_index(idx)` list the instruments of a channel.
  `MidiDevice` is the abstract base for devices that map key names to notes.
- `drumkit.validation` checks a preset with `validate_preset`, `validate_layer`
  and `validate_control`, and raises `MultiValidationError`, whose `errors`
  attribute lists every `ValidationError` found.
- `drumkit.mididevice` provides `UsbMidiDevice`, whose `keys_mapping()` maps
  names such as `kick1` or `hihat_close` to MIDI notes (36 and 42).
- `drumkit.convert` turns a list of controls into a mapping keyed by their
  lower-cased, trimmed, underscore-joined names (`control_key`,
  `transform_controls`).
- `drumkit.views` turns a preset into the structure a client shows
  (`PresetInfo`, `ChannelInfo`, `InstrumentInfo`, `LayerInfo`, `Tune`):
  `preset_to_view` and `instruments_to_view`. The view always starts with a
  `sampler` channel named `Kit`.
- `drumkit.sampler` defines the `SamplerRepo` interface a sampler backend
  implements, with `init_sampler` to open the audio output and MIDI input, and
  `load_instrument_to_new_channel`. Failures are raised as `SamplerError`.
- `drumkit.channel_control` provides `ChannelControlService`, whose `set_value`
  takes a stream of `ControlValue` items and yields an acknowledgement for each.

## Example

```python
from drumkit.models import KitPreset, PresetChannel, PresetInstrument, PresetControl
from drumkit.validation import validate_preset

preset = KitPreset(
    channels=[PresetChannel(key="1")],
    instruments=[
        PresetInstrument(
            channel_key="1",
            controls={"volume": PresetControl(type="volume", midi_cc=7)},
        )
    ],
)
validate_preset(preset)  # raises MultiValidationError if the preset is invalid
```

## What it does not do

The package has no command and runs no server. It does not read kit or preset
files, and it does not store kits or presets anywhere. It contains no
concrete sampler backend: to load anything into a sampler, implement
`SamplerRepo` yourself.