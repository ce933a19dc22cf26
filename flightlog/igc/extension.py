"""I and J record decoders and the extension schema they define.

I and J records declare extra columns appended to B and K records
respectively:

    I 03 3638FXA 3941ENL 4246TAS
    | |  |  | |
    | |  |  | +-- mnemonic (3 characters)
    | |  |  +-- last column, 1-indexed
    | |  +-- first column, 1-indexed
    | +-- number of descriptors
    +-- record type

An ``ExtensionSchema`` built from such a record is then handed to the B or K
decoder by the caller. The schema is a plain immutable value: the decoders
never keep one between calls, and a new I or J record produces a new schema
that replaces, rather than extends, the previous one.
"""

from dataclasses import dataclass, field

from flightlog.igc.encoder import encode_descriptor, encode_record
from flightlog.igc.errors import (
    DecodeError,
    FieldError,
    SchemaMismatch,
    WrongLength,
    invalid_field,
)
from flightlog.igc.fields import decode_number
from flightlog.igc.types import (
    ExtensionDescriptor,
    FixExtensionRecord,
    KExtensionRecord,
    RecordKind,
)

# Length of the fixed part of the records an extension can be attached to.
# Extension columns must start after it.
BASE_LENGTHS: dict[RecordKind, int] = {
    RecordKind.FIX: 35,
    RecordKind.EXTENSION_DATA: 7,
}

# The IGC standard limits a record to 76 characters excluding CR/LF.
MAX_LINE_LENGTH = 76

_HEADER_LENGTH = 3
_DESCRIPTOR_LENGTH = 7

_TARGETS: dict[type, RecordKind] = {
    FixExtensionRecord: RecordKind.FIX,
    KExtensionRecord: RecordKind.EXTENSION_DATA,
}


def _decode_descriptor(raw: str, field_name: str) -> ExtensionDescriptor:
    start = decode_number(raw[0:2], f"{field_name}.start", minimum=1)
    end = decode_number(raw[2:4], f"{field_name}.end", minimum=1)
    if end < start:
        raise FieldError(field_name, raw, "last column before first column")

    mnemonic = raw[4:7]
    if not (mnemonic.isascii() and mnemonic.isalnum()):
        raise FieldError(field_name, raw, f"invalid mnemonic {mnemonic!r}")

    return ExtensionDescriptor(start=start, length=end - start + 1, mnemonic=mnemonic)


def _decode_descriptors(
    line: str, record_kind: RecordKind
) -> tuple[int, tuple[ExtensionDescriptor, ...]] | DecodeError:
    """Decode the count and exactly that many descriptors.

    Characters after the declared descriptors are ignored. A line that ends
    before the declared number of whole descriptors is a ``SchemaMismatch``.
    """
    if len(line) < _HEADER_LENGTH:
        return WrongLength(record_kind, _HEADER_LENGTH, len(line), line)

    try:
        count = decode_number(line[1:3], "extension_count")

        available = (len(line) - _HEADER_LENGTH) // _DESCRIPTOR_LENGTH
        if available < count:
            return SchemaMismatch(record_kind, count, available, line)

        descriptors = []
        for index in range(count):
            offset = _HEADER_LENGTH + index * _DESCRIPTOR_LENGTH
            raw = line[offset : offset + _DESCRIPTOR_LENGTH]
            descriptors.append(_decode_descriptor(raw, f"extension_{index + 1}"))
    except FieldError as error:
        return invalid_field(error, record_kind, line)

    return count, tuple(descriptors)


def decode_fix_extension(line: str) -> FixExtensionRecord | DecodeError:
    """Decode an I record declaring B record extensions.

    Example:
        >>> decode_fix_extension("I033638FXA3941ENL4246TAS").descriptors[2]
        ExtensionDescriptor(start=42, length=5, mnemonic='TAS')
    """
    result = _decode_descriptors(line, RecordKind.FIX_EXTENSION)
    if isinstance(result, DecodeError):
        return result
    count, descriptors = result
    return FixExtensionRecord(declared_count=count, descriptors=descriptors)


def decode_k_extension(line: str) -> KExtensionRecord | DecodeError:
    """Decode a J record declaring K record extensions."""
    result = _decode_descriptors(line, RecordKind.K_EXTENSION)
    if isinstance(result, DecodeError):
        return result
    count, descriptors = result
    return KExtensionRecord(declared_count=count, descriptors=descriptors)


def _check_layout(
    target: RecordKind, descriptors: tuple[ExtensionDescriptor, ...]
) -> None:
    """Raise ``FieldError`` unless the descriptors fit the target record."""
    base_length = BASE_LENGTHS[target]
    mnemonics: set[str] = set()

    for index, descriptor in enumerate(descriptors):
        field_name = f"extension_{index + 1}"
        raw = encode_descriptor(descriptor)

        if descriptor.length < 1:
            raise FieldError(field_name, raw, "empty column range")
        if descriptor.start <= base_length:
            raise FieldError(
                field_name, raw, f"starts inside the first {base_length} columns"
            )
        if descriptor.end > MAX_LINE_LENGTH:
            raise FieldError(field_name, raw, f"ends past column {MAX_LINE_LENGTH}")
        if descriptor.mnemonic in mnemonics:
            raise FieldError(field_name, raw, "duplicate mnemonic")
        mnemonics.add(descriptor.mnemonic)

    ordered = sorted(descriptors, key=lambda descriptor: descriptor.start)
    for previous, current in zip(ordered, ordered[1:]):
        if current.start <= previous.end:
            raise FieldError(
                f"extension_{descriptors.index(current) + 1}",
                encode_descriptor(current),
                f"overlaps {previous.mnemonic}",
            )


@dataclass(frozen=True)
class ExtensionSchema:
    """Extension columns in effect for B records (from I) or K records (from J).

    Construct with ``from_record`` when decoding a log; calling the
    constructor directly validates the same layout rules but raises
    ``ValueError`` instead of returning an error value.

    Attributes:
        target: ``RecordKind.FIX`` or ``RecordKind.EXTENSION_DATA``.
        descriptors: Field descriptors in declaration order.

    Example:
        >>> record = decode_fix_extension("I013638FXA")
        >>> schema = ExtensionSchema.from_record(record)
        >>> schema.apply("B1101355206343N00006198WA0058800558123", "FXA")
        '123'
    """

    target: RecordKind
    descriptors: tuple[ExtensionDescriptor, ...]
    _by_mnemonic: dict[str, ExtensionDescriptor] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if self.target not in BASE_LENGTHS:
            raise ValueError(f"{self.target} records cannot carry extensions")
        _check_layout(self.target, self.descriptors)
        object.__setattr__(
            self,
            "_by_mnemonic",
            {descriptor.mnemonic: descriptor for descriptor in self.descriptors},
        )

    @classmethod
    def from_record(
        cls, record: FixExtensionRecord | KExtensionRecord
    ) -> "ExtensionSchema | DecodeError":
        """Build the schema declared by a decoded I or J record.

        Returns:
            The schema, or:
            - ``SchemaMismatch`` if the declared count differs from the number
              of descriptors present
            - ``InvalidField`` if descriptors overlap, repeat a mnemonic,
              start inside the fixed part of the target record or end past
              ``MAX_LINE_LENGTH``
        """
        target = _TARGETS.get(type(record))
        if target is None:
            raise TypeError(f"expected an I or J record, got {type(record).__name__}")

        if len(record.descriptors) != record.declared_count:
            return SchemaMismatch(
                record.kind,
                record.declared_count,
                len(record.descriptors),
                encode_record(record),
            )

        try:
            return cls(target=target, descriptors=record.descriptors)
        except FieldError as error:
            return invalid_field(error, record.kind, encode_record(record))

    @property
    def base_length(self) -> int:
        return BASE_LENGTHS[self.target]

    @property
    def required_length(self) -> int:
        """Minimum line length holding every declared column."""
        return max(
            (descriptor.end for descriptor in self.descriptors),
            default=self.base_length,
        )

    @property
    def mnemonics(self) -> tuple[str, ...]:
        return tuple(descriptor.mnemonic for descriptor in self.descriptors)

    def __len__(self) -> int:
        return len(self.descriptors)

    def __contains__(self, mnemonic: object) -> bool:
        return mnemonic in self._by_mnemonic

    def apply(self, line: str, mnemonic: str) -> str | None:
        """Return the raw columns of one extension field.

        Args:
            line: Complete B or K line, including the leading record letter.
            mnemonic: A mnemonic declared by this schema.

        Returns:
            The column slice, or None if the line ends before the field does.

        Raises:
            KeyError: If the schema does not declare ``mnemonic``.
        """
        descriptor = self._by_mnemonic[mnemonic]
        if len(line) < descriptor.end:
            return None
        return line[descriptor.start - 1 : descriptor.end]

    def extract(self, line: str) -> dict[str, str]:
        """Return every declared field that the line holds in full.

        Fields whose columns run past the end of the line are left out.
        """
        return {
            descriptor.mnemonic: line[descriptor.start - 1 : descriptor.end]
            for descriptor in self.descriptors
            if len(line) >= descriptor.end
        }


def check_schema_target(schema: ExtensionSchema | None, target: RecordKind) -> None:
    """Raise ``ValueError`` if ``schema`` describes another record kind."""
    if schema is not None and schema.target is not target:
        raise ValueError(
            f"schema for {schema.target.value} records used on a "
            f"{target.value} record"
        )


def required_length(schema: ExtensionSchema | None, target: RecordKind) -> int:
    """Minimum length of a ``target`` line decoded with ``schema``.

    Raises:
        ValueError: If ``schema`` describes another record kind.
    """
    check_schema_target(schema, target)
    if schema is None:
        return BASE_LENGTHS[target]
    return schema.required_length


def split_extensions(
    line: str, schema: ExtensionSchema | None, target: RecordKind
) -> tuple[dict[str, str], tuple[str, ...], str]:
    """Split the columns after the fixed part of a B or K line.

    Returns:
        The values of the declared fields the line holds in full, the
        mnemonics of the fields it ends before, and the trailing data after
        the last declared column. Without a schema every character after the
        fixed part is trailing data.
    """
    end = required_length(schema, target)
    if schema is None:
        return {}, (), line[end:]

    extensions = schema.extract(line)
    missing = tuple(
        mnemonic for mnemonic in schema.mnemonics if mnemonic not in extensions
    )
    return extensions, missing, line[end:]
