"""In-memory stand-ins for the parts of pymongo the cache store uses."""

from types import SimpleNamespace

from pymongo.errors import PyMongoError


class FakeCursor:

    def __init__(self, documents):
        self._documents = list(documents)

    def sort(self, key, direction=1):
        self._documents.sort(key=lambda d: d[key], reverse=direction < 0)
        return self

    def limit(self, count):
        self._documents = self._documents[:count]
        return self

    def __iter__(self):
        return iter(self._documents)


class FakeCollection:

    def __init__(self, name):
        self.name = name
        self.documents = []
        self.page_reads = []
        self.deleted_batches = []
        self.fail_reads = False
        self.fail_deletes = False
        self.fail_inserts_after = None
        self._next_id = 1

    def insert_one(self, document):
        if self.fail_inserts_after is not None and len(self.documents) >= self.fail_inserts_after:
            raise PyMongoError("insert failed")
        stored = dict(document, _id=self._next_id)
        self._next_id += 1
        self.documents.append(stored)
        return SimpleNamespace(inserted_id=stored["_id"])

    def find(self, filter=None, projection=None):
        if self.fail_reads:
            raise PyMongoError("read failed")
        collection = self

        class _RecordingCursor(FakeCursor):
            def __iter__(self):
                collection.page_reads.append(len(self._documents))
                return super().__iter__()

        return _RecordingCursor(self._project(d, projection) for d in self.documents)

    def delete_many(self, filter):
        if self.fail_deletes:
            raise PyMongoError("delete failed")
        ids = set(filter["_id"]["$in"])
        before = len(self.documents)
        self.documents = [d for d in self.documents if d["_id"] not in ids]
        deleted = before - len(self.documents)
        self.deleted_batches.append(deleted)
        return SimpleNamespace(deleted_count=deleted)

    @staticmethod
    def _project(document, projection):
        if not projection:
            return dict(document)
        included = [k for k, v in projection.items() if v]
        projected = {k: document[k] for k in included if k in document}
        if projection.get("_id", 1) and "_id" not in included:
            projected["_id"] = document["_id"]
        return projected


class FakeDatabase:

    def __init__(self):
        self.collections = {}
        self.fail_listing = False

    def __getitem__(self, name):
        if name not in self.collections:
            self.collections[name] = FakeCollection(name)
        return self.collections[name]

    def list_collection_names(self):
        if self.fail_listing:
            raise PyMongoError("listing failed")
        return [name for name, c in self.collections.items() if c.documents]

    def seed(self, name, count, per_document=1):
        collection = self[name]
        for i in range(count):
            collection.insert_one({"events": [{"title": f"Event {i}.{j}"} for j in range(per_document)]})
        return collection


class FakeClient:

    def __init__(self, database=None):
        self.database = database or FakeDatabase()
        self.closed = False

    def __getitem__(self, name):
        return self.database

    def close(self):
        self.closed = True
