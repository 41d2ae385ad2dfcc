"""Use case that answers a query with index-assisted candidate narrowing."""
from __future__ import annotations

import logging
from collections import Counter

from application.services.path_flattener import equality_key, existence_key
from application.services.query_matcher import match
from application.services.query_parser import parse_query
from domain.entities import Clause, Operator, Query, SearchHit
from domain.errors import DocumentNotFoundError
from domain.interfaces import DocumentStore, IndexStore

logger = logging.getLogger(__name__)


def index_key_for(clause: Clause) -> str:
    """Equality clauses probe ``path=value``; relational ones only field presence."""

    if clause.operator is Operator.EQ:
        return equality_key(clause.dotted_path, clause.value)
    return existence_key(clause.dotted_path)


def find_candidates(query: Query, index_store: IndexStore) -> list[str]:
    """Ids that appear under the index key of every clause."""

    counts: Counter[str] = Counter()
    for clause in query:
        counts.update(index_store.lookup(index_key_for(clause)))
    required = len(query)
    return [document_id for document_id, count in counts.items() if count == required]


def execute_query(
    query: Query,
    *,
    document_store: DocumentStore,
    index_store: IndexStore,
) -> list[SearchHit]:
    if query.is_empty:
        return []

    hits: list[SearchHit] = []
    for document_id in find_candidates(query, index_store):
        try:
            document = document_store.get(document_id)
        except DocumentNotFoundError:
            logger.debug("Skipping candidate %s: document expired", document_id)
            continue
        if match(query.clauses, document):
            hits.append(SearchHit(id=document_id, document=document))
    return hits


def search_documents(
    query_text: str,
    *,
    document_store: DocumentStore,
    index_store: IndexStore,
) -> list[SearchHit]:
    """Return every stored document that satisfies all clauses of ``query_text``.

    Raises ``InvalidQueryError`` for malformed queries. Storage corruption
    aborts the whole search; no partial results are returned.
    """

    query = parse_query(query_text)
    hits = execute_query(query, document_store=document_store, index_store=index_store)
    logger.info("Query %r matched %d document(s)", query_text, len(hits))
    return hits


def search_by_scan(query_text: str, *, document_store: DocumentStore) -> list[SearchHit]:
    """Evaluate the query against every stored document, ignoring the index."""

    query = parse_query(query_text)
    if query.is_empty:
        return []
    return [
        SearchHit(id=document_id, document=document)
        for document_id, document in document_store.get_all().items()
        if match(query.clauses, document)
    ]


__all__ = ["index_key_for", "find_candidates", "execute_query", "search_documents", "search_by_scan"]
