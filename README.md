# printtui

printtui is a small curses interface for managing printers on a machine that runs CUPS. It lists the enabled printers and shows the options of the selected one. From there you can add a new printer or remove an existing one.

It calls the CUPS command-line tools `lpstat`, `lpoptions`, `lpinfo` and `lpadmin`. They must be installed and on your `PATH`. Adding or removing a printer usually needs administrative rights.

## Installation

```
pip install .
```

The package has no third-party dependencies. It needs a Python with the `curses` module, which POSIX systems provide.

## Usage

```
printtui
```

`printtui --help` prints a short usage message. The command has no other options.

If one of the CUPS tools cannot be started, or its output is not valid UTF-8, printtui prints `printtui: <reason>` to standard error and exits with status 1. If a tool runs but fails, printtui does not report it. The list shows whatever the tools printed.

If `ESCDELAY` is not set, printtui sets it to 25 ms so that `Esc` responds quickly.

### Printer list

At start-up printtui runs `lpstat -e` to list the printers. For each printer it then runs `lpoptions -d <name>` and shows the output, split on spaces, as that printer's options. Be aware that `lpoptions -d` also makes the named printer your default destination.

| Key   | Action                                                   |
|-------|----------------------------------------------------------|
| `k`   | Select the previous printer (wraps around)               |
| `j`   | Select the next printer (wraps around)                   |
| `a`   | Open the form for a new printer                          |
| `d`   | Remove the selected printer right away (`lpadmin -x`)    |
| `q`   | Quit                                                     |

`d` asks for no confirmation. After a removal the list is reloaded and the first printer is selected.

### Adding a printer

When the form opens, printtui runs `lpinfo -v` to list the device URIs and `lpinfo -m` to list the drivers. The form has three fields: the printer name (it starts as `New Printer`), the device and the driver.

| Key     | Action                                       |
|---------|----------------------------------------------|
| `k`     | Move to the previous field                   |
| `j`     | Move to the next field                       |
| `e`     | Edit the selected field                      |
| `w`     | Create the printer and go back to the list   |
| `Esc`   | Go back to the list without creating it      |
| `q`     | Quit                                         |

While you edit the name, you can type ASCII letters, digits, `_` and `-`. `Backspace` deletes the last character. While you edit the device or the driver, a list of the available choices appears beside the form, and `k` and `j` move through it. `Esc` leaves edit mode.

On `w`, printtui runs

```
lpadmin -p <name> -E -v <device> -m <driver>
```

The driver is the first word of the selected `lpinfo -m` line. If no device or driver is available, the literal text `No URI` or `No Driver` is passed in its place.

## Using it from Python

The module `printtui.cups` wraps the CUPS tools. It can be used on its own:

- `get_all_printers()` returns `Printer` objects with `name` and `options`.
- `get_all_devices()` and `get_all_drivers()` return `Device` and `Driver` objects, each with a `value`.
- `create_printer(name, device, driver)` and `remove_printer(name)` run `lpadmin`.
- `parse_printer_names`, `parse_options`, `parse_devices` and `parse_drivers` parse the text output of the tools without running anything.
- `CupsError` is raised when a tool cannot be started or its output cannot be decoded.

`printtui.app.main()` starts the interface, and `printtui.app.run(window, state)` runs the main loop in a curses window you supply.

## What it does not do

printtui cannot edit an existing printer or change its options. It also cannot enable or disable queues or manage print jobs. The options pane only displays what `lpoptions` prints.

## Development

```
pip install -e ".[test]"
pytest
```