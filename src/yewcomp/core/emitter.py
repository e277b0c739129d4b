"""
Emitter: maps a validated ComponentSpec onto its output artifacts.

Emission is a pure structural transformation with no failure path. Derived
names are plain concatenations (``<Name>Props``, ``<Name>State``) and are not
checked against other names in the enclosing scope.
"""

from __future__ import annotations

import logging

from . import ir

logger = logging.getLogger(__name__)

MESSAGE_TYPE_NAME = "Message"

PROPS_TRAITS = [
    ir.RecordTrait.PROPERTIES,
    ir.RecordTrait.CLONE,
    ir.RecordTrait.DEBUG,
    ir.RecordTrait.PARTIAL_EQ,
]
STATE_TRAITS = [
    ir.RecordTrait.CLONE,
    ir.RecordTrait.DEBUG,
    ir.RecordTrait.PARTIAL_EQ,
]


def emit(spec: ir.ComponentSpec) -> list[ir.Artifact]:
    """
    Produce the five artifacts for a component, in their fixed order.

    Args:
        spec: Validated component description

    Returns:
        [message enum, props record, state record, state constructor, component]
    """
    props_name = spec.props_name()
    state_name = spec.state_name()

    artifacts: list[ir.Artifact] = [
        ir.MessageEnumArtifact(
            visibility=spec.visibility,
            name=MESSAGE_TYPE_NAME,
            variants=list(spec.message_variants),
        ),
        ir.RecordArtifact(
            kind=ir.ArtifactKind.PROPS_RECORD.value,
            visibility=spec.visibility,
            name=props_name,
            fields=list(spec.props_fields),
            traits=list(PROPS_TRAITS),
        ),
        ir.RecordArtifact(
            kind=ir.ArtifactKind.STATE_RECORD.value,
            visibility=spec.visibility,
            name=state_name,
            fields=list(spec.state_fields),
            traits=list(STATE_TRAITS),
        ),
        ir.StateConstructorArtifact(
            state_name=state_name,
            function=spec.create_fn,
        ),
        ir.ComponentArtifact(
            visibility=spec.visibility,
            name=spec.name,
            message_name=MESSAGE_TYPE_NAME,
            props_name=props_name,
            state_name=state_name,
            update_fn=spec.update_fn,
            view_fn=spec.view_fn,
            change_detection=ir.ChangeDetectionSpec(),
        ),
    ]

    logger.debug(
        f"Emitted {len(artifacts)} artifacts for component {spec.name} "
        f"({len(spec.message_variants)} variants, {len(spec.props_fields)} props, "
        f"{len(spec.state_fields)} state fields)"
    )
    return artifacts
