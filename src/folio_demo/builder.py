"""Build in-memory demo objects from the definitions in ``data``."""

from __future__ import annotations

import logging
import random
from typing import Dict, Optional

from folio.domain.accounting import (
    Account,
    AccountTransaction,
    AccountTransactionType,
    Security,
)
from folio.domain.taxonomy import Assignment, Classification, Taxonomy
from folio.domain.taxonomy.value_objects import percent_to_weight
from folio_demo.data import (
    DEMO_ACCOUNT_NAME,
    DEMO_ASSIGNMENTS,
    DEMO_CLASSIFICATIONS,
    DEMO_SECURITIES,
    DEMO_TAXONOMY_ID,
    DEMO_TAXONOMY_NAME,
    DEMO_TRANSACTIONS,
    RANDOM_SEED,
)

logger = logging.getLogger(__name__)


def build_demo_securities() -> Dict[str, Security]:
    return {
        definition.key: Security(
            name=definition.name,
            isin=definition.isin,
            ticker_symbol=definition.ticker_symbol,
        )
        for definition in DEMO_SECURITIES
    }


def build_demo_taxonomy(
    securities: Optional[Dict[str, Security]] = None,
    rng: Optional[random.Random] = None,
) -> Taxonomy:
    """Build the "Asset Classes" taxonomy with its security assignments.

    Parameters
    ----------
    securities
        Securities by key (built from the demo definitions if omitted)
    rng
        Random source for the initial node colors (seeded with RANDOM_SEED
        if omitted)
    """
    securities = securities if securities is not None else build_demo_securities()
    rng = rng or random.Random(RANDOM_SEED)

    taxonomy = Taxonomy(
        DEMO_TAXONOMY_ID,
        DEMO_TAXONOMY_NAME,
        root=Classification(DEMO_TAXONOMY_ID, DEMO_TAXONOMY_NAME, rng=rng),
    )
    nodes: Dict[str, Classification] = {DEMO_TAXONOMY_ID: taxonomy.root}

    for definition in DEMO_CLASSIFICATIONS:
        parent = nodes[definition.parent_id or DEMO_TAXONOMY_ID]
        node = Classification(
            definition.id,
            definition.name,
            parent=parent,
            description=definition.description,
            rng=rng,
        )
        node.set_rank(definition.rank)
        parent.add_child(node)
        nodes[definition.id] = node

    for assignment in DEMO_ASSIGNMENTS:
        nodes[assignment.classification_id].add_assignment(
            Assignment(
                securities[assignment.security_key],
                weight=percent_to_weight(assignment.percent),
            ),
        )

    logger.debug(
        "Built demo taxonomy with %d classifications",
        len(taxonomy.get_all_classifications()),
    )
    return taxonomy


def build_demo_account() -> Account:
    account = Account(DEMO_ACCOUNT_NAME)
    for definition in DEMO_TRANSACTIONS:
        account.add_transaction(
            AccountTransaction(
                date=definition.date,
                type=AccountTransactionType[definition.type],
                amount=definition.amount,
                note=definition.note,
            ),
        )
    return account
