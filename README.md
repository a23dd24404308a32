# parqueo

A console program for running a small parking lot. It keeps a register of
vehicles and their owners in plain text files. It records entries and exits
in a history file and shows a grid of the lot's cells.

## Installation

```
pip install .
```

## Running

```
parqueo
parqueo --directorio /path/to/workdir
```

The data files live in the `output/` folder of the working directory. That is
the current directory unless `--directorio` names another one. The folder is
created when the first record is written.

Use the up and down arrow keys to move through the menus and Enter to choose.
The selection wraps around at either end. When standard input is not a
terminal, keys are read one character at a time and a newline counts as
Enter. Entries from the main menu:

- **Registrar ingreso**
  - *Ya estoy registrado*: you type a plate (`AAA-1234` or `AAA1234`). If the
    plate is in `Autos.txt`, the program appends `plate,YYYY-MM-DD HH:MM:SS`
    to `Historial.txt` and marks the first cell of the grid as occupied.
  - *Primera vez*: you choose the vehicle type (Auto, Moto or Vehiculo pesado)
    and give the plate, colour, owner's name, id number, e-mail, mobile
    number, address and birth date. The program upper-cases the plate, drops
    its hyphens and refuses plates that are already registered. E-mail
    addresses and mobile numbers are checked; a mobile number must be ten
    digits starting with `0`. The vehicle is appended to `Autos.txt` and the
    owner to `Clientes.txt`.
- **Registrar salida**: looks the plate up in `Historial.txt`. If the record
  found has no exit time, the program appends `plate,SALIDA,timestamp` and
  frees the first cell of the grid.
- **Ver historial**: prints history records whose entry time falls in a range
  (compared as text, both ends included), or all records for one plate.
- **Buscar auto en el parqueadero**: tells whether a plate is in `Autos.txt`.
- **Ver parqueadero**: shows the ten-cell grid. `[O]` is free and `[X]` is
  taken.
- **Salir**: quit.

## Data files

| File            | Contents                                        |
|-----------------|-------------------------------------------------|
| `Autos.txt`     | one line per vehicle, with its owner's data     |
| `Clientes.txt`  | one line per owner                              |
| `Historial.txt` | entry lines and exit lines                      |

All are comma-separated text. The program only ever appends to them.

## Using it as a library

```python
from parqueo.parqueadero import Parqueadero
from parqueo.vehiculo import validar_placa

lot = Parqueadero(10)
lot.marcar_casilla_ocupada(0)
print(lot.consultar_disponibilidad())   # 9
print(validar_placa("ABC-0000"))        # True
```

Modules:

- `parqueo.persona`:
  - `Persona`, with `Persona.nuevo` to work out the age and `to_line`.
  - `calcular_edad`.
- `parqueo.vehiculo`: `Vehiculo` and `validar_placa`.
- `parqueo.celda`: `Celda`, with `estacionar` and `liberar`.
- `parqueo.parqueadero`: `Parqueadero`, a row of cells that defaults to 300.
  - `buscar_auto`, `consultar_disponibilidad`, `marcar_casilla_ocupada`,
    `marcar_casilla_libre`, `ver_parqueadero` and `mostrar_estado`.
- `parqueo.registro`:
  - `Registro`, with `registrar_ingreso`, `registrar_salida` and `to_string`.
  - `marca_de_tiempo`.
- `parqueo.lista`: `ListaDobleCircular`.
  - Loaders: `cargar_desde_archivo_registro`, `cargar_desde_archivo_persona`,
    `cargar_desde_archivo_auto`.
  - Lookups: `buscar_por_placa`, `mostrar_por_rango_fechas`,
    `mostrar_por_placa`.
- `parqueo.validation`:
  - Checks: `validate_id`, `validate_email`, `validate_cell_phone`.
  - Key-by-key readers: `ingresar_int`, `ingresar_float`, `ingresar_double`,
    `ingresar_string`, `ingresar_string_con_espacios`, `ingresar_char`,
    `ingresar_telefono`.
  - `getch`.
- `parqueo.menu`: `Menu`, which can be shown with any key reader and output
  stream.
- `parqueo.archivo`: `leer_lineas`, `mostrar_archivo`,
  `guardar_datos_en_archivo`.
- `parqueo.cli`: `main`, `registrar_por_primera_vez`, `normalizar_placa`,
  `dias_del_mes`.

## What it does not do

- The occupancy grid lives only in memory. It is not saved between runs, and
  entries and exits always mark the first cell, not a chosen one.
- "Buscar auto" checks the vehicle register, not which cells are occupied.
- Vehicles are written to `Autos.txt` as plate, owner, type, colour. They are
  read back as plate, type, colour, owner, so a reloaded vehicle's type,
  colour and owner fields do not match what was saved. Lookup by plate is not
  affected.
- New plates are stored without hyphens. The "Ya estoy registrado" lookup
  compares the plate exactly as typed.
- History entry lines have no exit field. Because of how they are read back,
  "Registrar salida" reports an existing exit for them.

## Tests

```
pip install .[test]
pytest
```