# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import sys
from pathlib import Path

# Add src to PYTHONPATH for local runs
sys.path.append(str(Path(__file__).resolve().parents[2] / "src"))

from AzureSearch.Client.client import SearchClient
from AzureSearch.Client.core.config import SearchConfig
from AzureSearch.Client.core.errors import DocumentBatchError, HttpError, PreconditionFailedError
from AzureSearch.Client.core.telemetry import TelemetryConfig


service_name = input("Enter search service name (e.g. my-service): ").strip()
if not service_name:
	print("No service name entered; exiting.")
	sys.exit(1)
api_key = input("Enter admin key: ").strip()
if not api_key:
	print("No key entered; exiting.")
	sys.exit(1)

config = SearchConfig(telemetry=TelemetryConfig(enable_logging=True))


def log_call(call: str) -> None:
	print({"call": call})


with SearchClient(service_name, api_key, config=config) as client:
	log_call("client.resources.list_indexes()")
	indexes = client.resources.list_indexes()
	for index in indexes:
		key = index.key_field.name if index.key_field else None
		print(f"  {index.name}: {len(index.fields)} fields, key={key}")

	log_call("client.resources.list_data_sources() / list_indexers()")
	print({"datasources": client.resources.list_data_sources(), "indexers": client.resources.list_indexers()})

	if not indexes:
		print("No indexes; nothing more to show.")
		sys.exit(0)

	index = indexes[0]
	log_call(f"client.documents.query({index.name!r}, 'search=*&$top=5')")
	page = client.documents.query(index.name, "search=*&$top=5&$count=true")
	print(f"  total={page.count} first page={len(page.value)} more={page.has_more}")
	pages = 1
	while page.has_more and pages < 3:
		page = client.documents.query_next(page.next_link)
		pages += 1
		print(f"  page {pages}: {len(page.value)} documents")

	log_call(f"client.resources.get('indexes', {index.name!r}) + conditional update")
	content, etag = client.resources.get("indexes", index.name)
	try:
		client.resources.update("indexes", index.name, content, etag)
		print("  conditional update succeeded")
	except PreconditionFailedError as ex:
		print(f"  index changed concurrently: {ex.message}")

	if index.key_field is not None:
		key_field = index.key_field.name
		doc = {key_field: "quickstart-sample"}
		try:
			log_call(f"client.documents.upload({index.name!r}, {doc}, create_new=True)")
			client.documents.upload(index.name, doc, create_new=True)
			log_call(f"client.documents.delete({index.name!r}, {key_field!r}, 'quickstart-sample')")
			client.documents.delete(index.name, key_field, "quickstart-sample")
		except (DocumentBatchError, HttpError) as ex:
			print(f"  document write failed: {ex.message}")
