"""Graded self-check of the HashMap against a fixed bucket layout."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

from .hashmap import HashMap, Pair, hash_key, is_equal

POINTS_PER_PART = 10

_INFO = "   [ INFO ] "
_OK = "   [\033[32;1m OK \033[0m] "
_FAILED = "   [\033[31m FAILED \033[0m] "

# Keys of the reference table and the bucket each one hashes to.
_LAYOUT = (
    ("casa", 8),
    ("carro", 7),
    ("saco", 6),
    ("olla", 0),
    ("cesa", 4),
    ("case", 2),
)

_EXPECTED_ENLARGED = (
    "value3  (null)  (null)  (null)  value4  (null)  value2  value1  value0  "
    "(null)  (null)  (null)  value5  (null)  (null)  (null)  (null)  (null)  "
    "(null)  (null)"
)


class CheckFailed(Exception):
    """Raised when a check finds the map misbehaving."""

    def __init__(self, message: str, log: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.log = list(log)


@dataclass
class SectionResult:
    """Outcome of one section of checks."""

    title: str
    points: int
    max_points: int
    log: List[str] = field(default_factory=list)
    completed_parts: Tuple[int, ...] = ()
    failure: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.failure is None


def _info(log: List[str], message: str) -> None:
    log.append(_INFO + message)


def _ok(log: List[str], message: str) -> None:
    log.append(_OK + message)


def _fail(log: List[str], message: str) -> None:
    log.append(_FAILED + message)
    raise CheckFailed(message, log)


def _fresh_map(log: List[str]) -> HashMap:
    _info(log, "inicializando la tabla...")
    return initialize_map()


def initialize_map() -> HashMap:
    """Return a capacity-10 map holding six pairs at known buckets."""
    table = HashMap(10)
    for number, (word, index) in enumerate(_LAYOUT):
        table.buckets[index] = Pair(word, f"value{number}")
    table.size = len(_LAYOUT)
    return table


# --- create -----------------------------------------------------------------

def _create_returns_map(log: List[str]) -> None:
    if not isinstance(HashMap(10), HashMap):
        _fail(log, "createMap retorna NULL")


def _create_buckets_empty(log: List[str]) -> None:
    if any(bucket is not None for bucket in HashMap(10).buckets):
        _fail(log, "bucket no nulo")


def _create_fields(log: List[str]) -> None:
    for capacity in (10, 5):
        table = HashMap(capacity)
        if table.size != 0 or table.capacity != capacity or table.current != -1:
            _fail(log, "Varibales no fueron inicializadas correctamente")
    _ok(log, "Mapa inicializado correctamente")


def check_create() -> List[str]:
    """Check construction of an empty map; return the log."""
    log: List[str] = []
    for step in (_create_returns_map, _create_buckets_empty, _create_fields):
        step(log)
    return log


# --- hash -------------------------------------------------------------------

def check_hash() -> List[str]:
    """Probe the hash and key comparison; return the warnings found."""
    warnings: List[str] = []
    for word, capacity in (("computador", 10), ("silla", 50), ("mesa", 5)):
        position = hash_key(word, capacity)
        if not 0 <= position < capacity:
            warnings.append(f"posicion invalida ({word} -> {position})")

    hits = [0] * 10
    for word in ("caso", "cosa", "cesa", "cae", "casa", "saca", "saco", "case"):
        position = hash_key(word, 10)
        hits[position] += 1
        if hits[position] >= 3:
            warnings.append("demasiadas colisiones")
            break

    for word in ("hola", "chao", "casa"):
        if hash_key(str(word), 10) != hash_key(str(word), 10):
            warnings.append("error: valor diferente para misma clave!")

    if not is_equal("hola", "hola"):
        warnings.append('error: "hola"!="hola"')
    if is_equal("hola", "chao"):
        warnings.append('error: "hola"=="chao"')
    if is_equal("hola", None):
        warnings.append("error: si key es nula retornar NULL")
    if is_equal(None, None):
        warnings.append("error: si key es nula retornar NULL")
    return warnings


# --- insert -----------------------------------------------------------------

def _insert_free_slot(log: List[str]) -> None:
    table = _fresh_map(log)
    _info(log, "se inserta elemento con hash=3")
    table.insert(":key", "value")
    pair = table.buckets[3]
    if pair is None:
        _fail(log, "bucket[3]==NULL")
    if pair.key != ":key" or pair.value != "value":
        _fail(log, "elemento no fue insertado correctamente (hash -> 3)")
    if table.size != 7:
        _fail(log, "no modifico variable size")
    if table.enlarged:
        _fail(log, "llamo a funcion enlarge")
    _ok(log, "insercion exitosa")


def _insert_duplicate(log: List[str]) -> None:
    table = _fresh_map(log)
    _info(log, "se intenta insertar elemento repetido (key=case)")
    table.insert("case", "repetido")
    if table.buckets[1] is not None:
        _fail(log, "no se deben agregar elementos repetidos")


def _expect_value(log: List[str], table: HashMap, index: int) -> None:
    pair = table.buckets[index]
    if pair is None or not is_equal(pair.value, "value"):
        _fail(log, f"elemento no fue insertado correctamente (en casilla {index})")
    _ok(log, "insercion exitosa")


def _insert_probe(log: List[str]) -> None:
    table = _fresh_map(log)
    _info(log, "se intenta insertar elemento con hash=7")
    table.insert("key", "value")
    _expect_value(log, table, 9)


def _insert_wraparound(log: List[str]) -> None:
    table = _fresh_map(log)
    _info(log, "se inserta elemento con hash=7")
    table.insert("key", "value")
    _expect_value(log, table, 9)
    _info(log, "se falsea tamanno de tabla a 6 (par evitar enlarge)")
    table.size = 6
    _info(log, "se inserta elemento con hash=6")
    table.insert("holi", "value")
    _expect_value(log, table, 1)


def check_insert() -> List[str]:
    """Check insertion, duplicates and collision probing; return the log."""
    log: List[str] = []
    for step in (_insert_free_slot, _insert_duplicate, _insert_probe, _insert_wraparound):
        step(log)
    return log


# --- search -----------------------------------------------------------------

def _search_direct(log: List[str]) -> None:
    table = _fresh_map(log)
    _info(log, "buscando elemento con key=carro")
    found = table.search("carro")
    if found is None:
        _fail(log, "searchMap retorna NULL")
    if found is not table.buckets[7]:
        _fail(log, "elemento retornado por search no coincide")
    _ok(log, "elemento encontrado correctamente")
    if table.current != 7:
        _fail(log, "recuerda actualizar el current")


def _search_collided(log: List[str]) -> None:
    table = _fresh_map(log)
    _info(log, "se inserta par (key,value) con hash=7 en posicion 9")
    table.buckets[9] = Pair("key", "value")
    _info(log, "buscando elemento con key=key")
    found = table.search("key")
    if found is None:
        _fail(log, "searchMap retorna NULL")
    if found is not table.buckets[9]:
        _fail(log, "elemento retornado por search no coincide")
    _ok(log, "elemento encontrado correctamente")


def _search_missing(log: List[str]) -> None:
    table = _fresh_map(log)
    _info(log, 'se busca clave:"holo" con hash=2')
    found = table.search("holo")
    if found is not None:
        _fail(log, f"searchMap retorna un elemento con clave {found.key}")
    _ok(log, "clave no encontrada")


def check_search() -> List[str]:
    """Check lookup of present, collided and absent keys; return the log."""
    log: List[str] = []
    for step in (_search_direct, _search_collided, _search_missing):
        step(log)
    return log


# --- erase ------------------------------------------------------------------

def _erase_present(log: List[str]) -> None:
    table = _fresh_map(log)
    _info(log, "se elimina dato con key=olla")
    table.erase("olla")
    pair = table.buckets[0]
    if pair is None:
        _fail(log, "se elimino el Pair (buckets[0])")
    if pair.key is not None:
        _fail(log, "no se elimino la key: buckets[0]->key!=NULL")
    if table.size != 5:
        _fail(log, "recuerda reducir size en 1")
    _ok(log, "el dato se elimino correctamente")


def _erase_collided(log: List[str]) -> None:
    table = _fresh_map(log)
    _info(log, "se inserta par (key,value) con hash=7 en posicion 9")
    table.buckets[9] = Pair("key", "value")
    _info(log, "se intenta eliminar el mismo dato")
    table.erase("key")
    if table.buckets[9].key is not None:
        _fail(log, "no se eliminó el dato")
    _ok(log, "el dato se elimino correctamente")


def _erase_missing(log: List[str]) -> None:
    table = _fresh_map(log)
    _info(log, "se intenta eliminar dato que no existe (key:holo con hash=2)")
    table.erase("holo")
    if table.buckets[2].key is None:
        _fail(log, "se eliminó dato case")
    _ok(log, "eraseMap no hace nada")


def check_erase() -> List[str]:
    """Check erasing present, collided and absent keys; return the log."""
    log: List[str] = []
    for step in (_erase_present, _erase_collided, _erase_missing):
        step(log)
    return log


# --- first / next -----------------------------------------------------------

def _first(log: List[str]) -> None:
    table = _fresh_map(log)
    _info(log, "llamando a firstMap")
    pair = table.first()
    if pair is None:
        _fail(log, "firstMap retorna NULL")
    if pair is not table.buckets[0]:
        _fail(log, "firstMap retorna no retorna el primer dato")
    if table.current != 0:
        _fail(log, "recuerda actualizar el current")
    _ok(log, "firstMap retorna el primer dato de la tabla")

    _info(log, "eliminando el primer dato de la tabla")
    table.buckets[0].key = None
    _info(log, "llamando a firstMap")
    pair = table.first()
    if pair is not table.buckets[2]:
        _fail(log, "firstMap no retorna el primer valor")
    if table.current != 2:
        _fail(log, "recuerda actualizar el current")
    _ok(log, "firstMap retorna el primer dato de la tabla")


def _next(log: List[str]) -> None:
    table = _fresh_map(log)
    _info(log, "posicionando a current en la primera casilla")
    table.current = 0
    if table.next() is not table.buckets[2]:
        _fail(log, "nextMap no retorna bucket[2]->value")
    _ok(log, "nextMap retorna bucket[2]")
    if table.current != 2:
        _fail(log, "recuerda actualizar el current")

    _info(log, "posicionando a current en la casilla 7")
    table.current = 7
    if table.next() is not table.buckets[8]:
        _fail(log, "nextMap no retorna bucket[8]->value")
    _ok(log, "nextMap retorna bucket[8]")

    _info(log, "llamando a nextMap (deberia retornar NULL)")
    if table.next() is not None:
        _fail(log, "nextMap no retorna NULL")
    _ok(log, "nextMap retorna NULL")


def check_first_next() -> List[str]:
    """Check traversal with first and next; return the log."""
    log: List[str] = []
    for step in (_first, _next):
        step(log)
    return log


# --- enlarge ----------------------------------------------------------------

def _enlarge(log: List[str]) -> None:
    table = _fresh_map(log)
    value3 = table.buckets[0].value
    value5 = table.buckets[2].value
    value4 = table.buckets[4].value

    table.enlarge()

    buckets = table.buckets
    if (
        buckets[0] is None or buckets[0].value is not value3
        or buckets[2] is not None
        or buckets[12] is None or buckets[12].value is not value5
        or buckets[4] is None or buckets[4].value is not value4
    ):
        listing = "".join(
            "(null)  " if pair is None else f"{pair.value}  " for pair in buckets
        )
        _fail(
            log,
            f"enlarged table is:\n{listing}\nbut should be: \n{_EXPECTED_ENLARGED}",
        )
    _ok(log, "enlarge realizado exitosamente")


def check_enlarge() -> List[str]:
    """Check that enlarging rehashes into the expected buckets; return the log."""
    log: List[str] = []
    _enlarge(log)
    return log


# --- runner -----------------------------------------------------------------

_Step = Callable[[List[str]], None]

_SECTIONS: Tuple[Tuple[str, Tuple[Tuple[int, Tuple[_Step, ...]], ...]], ...] = (
    ("create map", ((1, (_create_returns_map, _create_buckets_empty, _create_fields)),)),
    (
        "insert",
        (
            (2, (_insert_free_slot, _insert_duplicate)),
            (3, (_insert_probe, _insert_wraparound)),
        ),
    ),
    ("search", ((4, (_search_direct, _search_collided, _search_missing)),)),
    ("erase", ((5, (_erase_present, _erase_collided, _erase_missing)),)),
    ("first-next", ((6, (_first, _next)),)),
    ("enlarge", ((7, (_enlarge,)),)),
)


def run_checks(test_id: Optional[int] = None) -> List[SectionResult]:
    """Run every section in order.

    A section stops at its first failure. When ``test_id`` names a part
    and that part passes, the run stops right after it.
    """
    results: List[SectionResult] = []
    for title, parts in _SECTIONS:
        log: List[str] = []
        points = 0
        completed: List[int] = []
        failure: Optional[str] = None
        reached_target = False
        try:
            for part_id, steps in parts:
                for step in steps:
                    step(log)
                points += POINTS_PER_PART
                completed.append(part_id)
                if test_id == part_id:
                    reached_target = True
                    break
        except CheckFailed as exc:
            failure = exc.message
        results.append(
            SectionResult(
                title=title,
                points=points,
                max_points=POINTS_PER_PART * len(parts),
                log=log,
                completed_parts=tuple(completed),
                failure=failure,
            )
        )
        if reached_target:
            break
    return results


def _parse_test_id(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the checks and print their log, then SUCCESS or the total score."""
    if argv is None:
        argv = sys.argv[1:]
    test_id = _parse_test_id(argv[0]) if argv else None

    results = run_checks(test_id)
    out = sys.stdout
    for result in results:
        out.write(f"\n{result.title} tests:\n")
        for line in result.log:
            out.write(line + "\n")

    if test_id is not None and any(test_id in r.completed_parts for r in results):
        out.write("SUCCESS\n")
        return 0

    if not argv:
        total = sum(r.points for r in results)
        maximum = sum(POINTS_PER_PART * len(parts) for _, parts in _SECTIONS)
        out.write(f"\ntotal_score: {total}/{maximum}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())