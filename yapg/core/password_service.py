from __future__ import annotations

from typing import Optional

from yapg.core import password_engine as engine
from yapg.core.charsets import CharsetSpec
from yapg.core.error_dialect import YapgError
from yapg.core.models import (
    EAVESDROPPER_THRESHOLD,
    ENTROPY_THRESHOLD,
    PasswordRequest,
    PasswordResult,
)
from yapg.core.password_entropy import quality_from_entropy_bits


def resolve_charset_spec(charsets: Optional[str], added_chars: str = "") -> CharsetSpec:
    if charsets is None:
        spec = CharsetSpec.std64()
    else:
        spec = CharsetSpec.parse(charsets)
    spec.add_string(added_chars)
    return spec


def collect_warnings(count: int, entropy_bits: int) -> tuple[str, ...]:
    warnings = []
    if count < EAVESDROPPER_THRESHOLD:
        warnings.append(f"Any eavesdropper will have an easy time trying one of your {count} passphrases!")
    if entropy_bits < ENTROPY_THRESHOLD:
        warnings.append(f"Low password entropy of {entropy_bits} bits!")
    return tuple(warnings)


def generate_passwords(
    request: PasswordRequest,
    source: Optional[engine.RandomSource] = None,
) -> PasswordResult:
    if request.count < 0:
        raise YapgError("count must be >= 0")
    if request.length < 0:
        raise YapgError("length must be >= 0")

    alphabet = resolve_charset_spec(request.charsets, request.added_chars).construct()
    if source is None:
        try:
            engine.assert_csprng_ready()
        except OSError as e:
            raise YapgError(str(e), code="rng_unavailable") from e
    generator = engine.PasswordGenerator(alphabet, request.length, source)

    entropy_bits = generator.entropy()
    try:
        outputs = generator.generate_n(request.count)
    except OSError as e:
        raise YapgError(str(e), code="rng_unavailable") from e

    return PasswordResult(
        outputs=tuple(outputs),
        alphabet=generator.alphabet,
        combinations=generator.combinations(),
        entropy_bits=entropy_bits,
        quality=quality_from_entropy_bits(entropy_bits),
        warnings=() if request.quiet else collect_warnings(request.count, entropy_bits),
    )
