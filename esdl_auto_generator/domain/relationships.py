"""
Relationship analysis domain logic for ESDL Auto Generator.

This module decides, for a field pointing at another model, whether it is
the owning side of the relation (a stored link) or the far side (a
computed backlink), and which local id field the stored link replaces.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from esdl_auto_generator.domain.models import BacklinkAst, NormalizedField, NormalizedModel
from esdl_auto_generator.exceptions import MissingRelationTargetError, UnsupportedCompositeKeyError


class PairingResolution(Enum):
    """Outcome of looking for the inverse side of a link."""

    OWNING = "owning"
    BACKLINK = "backlink"
    AMBIGUOUS = "ambiguous"


@dataclass
class RelationPairing:
    """Result of pairing a link field with fields on its target model."""

    resolution: PairingResolution
    source_model: str
    field_name: str
    target_model: str
    candidates: List[NormalizedField] = field(default_factory=list)

    @property
    def inverse_field(self) -> Optional[NormalizedField]:
        if self.resolution == PairingResolution.BACKLINK:
            return self.candidates[0]
        return None


class RelationshipResolver:
    """
    Resolves relation pairing between models.

    Holds the normalized model index so that target lookups and inverse
    candidate scans are key lookups.
    """

    def __init__(self, models: Dict[str, NormalizedModel]):
        """Initialize relationship resolver."""
        self.models = models

    def is_link(self, field: NormalizedField) -> bool:
        """Check if a field's type names a declared model."""
        return field.type_name is not None and field.type_name in self.models

    def check_relation_target(self, model: NormalizedModel, field: NormalizedField) -> None:
        """
        Ensure a field carrying a relation attribute points at a declared model.

        Raises:
            MissingRelationTargetError: the field's type is not a model
        """
        if field.relation is not None and not self.is_link(field):
            raise MissingRelationTargetError(model.name, field.name, str(field.declared_type))

    def target_of(self, model: NormalizedModel, field: NormalizedField) -> NormalizedModel:
        target = self.models.get(field.type_name) if field.type_name else None
        if target is None:
            raise MissingRelationTargetError(model.name, field.name, str(field.declared_type))
        return target

    def resolve_pairing(self, model: NormalizedModel, field: NormalizedField) -> RelationPairing:
        """
        Look for the inverse side of a link field.

        Candidates are the fields of the target model that carry a relation
        attribute and point back at ``model``.

        Args:
            model: Model owning the link field
            field: The link field

        Returns:
            OWNING with no candidate, BACKLINK with exactly one, AMBIGUOUS otherwise
        """
        target = self.target_of(model, field)
        candidates = target.relation_fields_pointing_at(model.name)

        if not candidates:
            resolution = PairingResolution.OWNING
        elif len(candidates) == 1:
            resolution = PairingResolution.BACKLINK
        else:
            resolution = PairingResolution.AMBIGUOUS

        return RelationPairing(
            resolution=resolution,
            source_model=model.name,
            field_name=field.name,
            target_model=target.name,
            candidates=candidates,
        )

    def build_backlink(self, pairing: RelationPairing, field: NormalizedField) -> BacklinkAst:
        """Computed backlink through the single inverse field, filtered by the target type."""
        inverse = pairing.inverse_field
        return BacklinkAst(
            expr=f".<{inverse.name}[is {pairing.target_model}]",
            multi=field.array,
        )

    def link_id_field(self, model: NormalizedModel, field: NormalizedField) -> Optional[str]:
        """
        Get the local id field a stored link is materialized through.

        Raises:
            UnsupportedCompositeKeyError: the relation names several id fields
        """
        relation = field.relation
        if relation is None or not relation.fields:
            return None
        if len(relation.fields) > 1:
            raise UnsupportedCompositeKeyError(model.name, field.name, relation.fields)
        return relation.fields[0]
