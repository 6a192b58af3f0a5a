from sqlalchemy.orm import Session
from database.models.number_sequence import NumberSequence

PREFIXES = {
    "estimate": "EST",
    "invoice": "INV",
}


def _get_sequence(db: Session, sequence_type: str) -> NumberSequence:
    sequence = (
        db.query(NumberSequence)
        .filter(NumberSequence.sequence_type == sequence_type)
        .first()
    )
    if sequence is None:
        sequence = NumberSequence(
            sequence_type=sequence_type,
            current_number=0,
            prefix=PREFIXES[sequence_type]
        )
        db.add(sequence)
        db.flush()
    return sequence


def next_number(db: Session, sequence_type: str) -> str:
    """Advance the sequence and format it, e.g. EST-0001, INV-0042"""
    sequence = _get_sequence(db, sequence_type)
    sequence.current_number += 1
    db.flush()
    prefix = sequence.prefix or PREFIXES[sequence_type]
    return f"{prefix}-{sequence.current_number:04d}"


def next_estimate_number(db: Session) -> str:
    return next_number(db, "estimate")


def next_invoice_number(db: Session) -> str:
    return next_number(db, "invoice")


def current_sequences(db: Session) -> dict:
    return {
        sequence_type: _get_sequence(db, sequence_type).current_number
        for sequence_type in PREFIXES
    }
