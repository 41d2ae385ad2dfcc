"""Streamlit stub demonstrating add, get and search flows."""
from __future__ import annotations

import json

import streamlit as st

from application.use_cases.add_document import add_document
from application.use_cases.get_document import get_document
from application.use_cases.search import search_documents
from domain.errors import DocDBError
from infrastructure.config import build_default_container


@st.cache_resource
def _container():
    container = build_default_container()
    container.start()
    return container


st.set_page_config(page_title="DocDB Demo")
container = _container()
st.title("DocDB Demo")

st.header("Add")
add_form = st.form("add")
document_text = add_form.text_area("Document (JSON object)", value='{"a": {"b": 1}}')
add_submit = add_form.form_submit_button("Add document")
if add_submit:
    try:
        document_id = add_document(
            json.loads(document_text),
            document_store=container.document_store,
            index_store=container.index_store,
        )
    except (ValueError, DocDBError) as exc:
        st.error(str(exc))
    else:
        st.success(f"Document {document_id} added")

st.header("Get")
lookup_id = st.text_input("Document ID")
if st.button("Get") and lookup_id:
    try:
        st.json(get_document(lookup_id, document_store=container.document_store))
    except DocDBError as exc:
        st.error(str(exc))

st.header("Search")
search_query = st.text_input("Query", value="a.b:1")
if st.button("Search"):
    try:
        hits = search_documents(
            search_query,
            document_store=container.document_store,
            index_store=container.index_store,
        )
    except DocDBError as exc:
        st.error(str(exc))
    else:
        st.write(f"{len(hits)} document(s)")
        for hit in hits:
            st.write(hit.to_dict())
