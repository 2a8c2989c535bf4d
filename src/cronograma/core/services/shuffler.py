"""
Barajado determinista para escalonar los ciclos de un grupo.

El mismo período y la misma composición del grupo producen siempre la misma
permutación, en cualquier proceso. Usa un hash polinómico y un generador
lineal congruente, no una fuente aleatoria externa.
"""

from typing import List, Sequence, TypeVar

T = TypeVar('T')

LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def simple_hash(text: str) -> int:
    """
    Hash polinómico (x31) sobre las unidades UTF-16 del texto.

    Se trunca a entero con signo de 32 bits en cada paso y se retorna
    el valor absoluto.
    """
    hash_value = 0
    data = text.encode('utf-16-le')
    for i in range(0, len(data), 2):
        code_unit = data[i] | (data[i + 1] << 8)
        hash_value = _to_int32((hash_value << 5) - hash_value + code_unit)
    return abs(hash_value)


class SeededRandom:
    """Generador lineal congruente: valores uniformes en [0, 1)."""

    def __init__(self, seed: int):
        self.state = seed

    def __call__(self) -> float:
        self.state = (self.state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return self.state / LCG_MODULUS


def seeded_shuffle(items: Sequence[T], seed: int) -> List[T]:
    """
    Permutación Fisher-Yates reproducible; no modifica la secuencia original.

    Args:
        items: Elementos a barajar
        seed: Semilla (normalmente simple_hash de "{período}-{grupo}")

    Returns:
        List: Nueva lista barajada
    """
    shuffled = list(items)
    random = SeededRandom(seed)
    current_index = len(shuffled)

    while current_index != 0:
        random_index = int(random() * current_index)
        current_index -= 1
        shuffled[current_index], shuffled[random_index] = shuffled[random_index], shuffled[current_index]

    return shuffled
