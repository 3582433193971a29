class TestDataStore:
    def test_append_keeps_order_and_does_not_dedupe(self, store, sample_cases):
        store.replace_all(sample_cases[:2])
        store.append(sample_cases[0])
        assert store.cases == [sample_cases[0], sample_cases[1], sample_cases[0]]

    def test_replace_all_copies_sequence(self, store, sample_cases):
        source = list(sample_cases)
        store.replace_all(source)
        source.pop()
        assert len(store.cases) == 3

    def test_find(self, store, sample_cases):
        store.replace_all(sample_cases)
        assert store.find("case-2") is sample_cases[1]
        assert store.find("missing") is None

    def test_token_invalidated_by_close(self, store):
        token = store.token()
        assert store.accepts(token)
        store.close()
        assert not store.accepts(token)
        assert not store.accepts(store.token())

    def test_close_releases_listeners(self, store, sample_cases):
        calls = []
        store.add_listener(lambda: calls.append(1))
        store.append(sample_cases[0])
        store.close()
        store.append(sample_cases[1])
        assert calls == [1]

    def test_remove_listener(self, store, sample_cases):
        calls = []
        listener = lambda: calls.append(1)
        store.add_listener(listener)
        store.remove_listener(listener)
        store.append(sample_cases[0])
        assert calls == []
