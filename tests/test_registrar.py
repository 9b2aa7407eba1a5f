import threading

from mapping_assembler.host import registry as registry_module
from mapping_assembler.host.registry import ExtensionRegistry, PrefixRegistry
from mapping_assembler.orchestrator.assembler import MappingAssembler
from mapping_assembler.orchestrator.errors import RegistrationFailed
from mapping_assembler.registrar import ensure_registered, is_registered
from mapping_assembler.vocabulary import MODEL_TYPE, R2RML_URI

from .helpers import FixedGraphOpener


class CountingPrefixRegistry(PrefixRegistry):
    def __init__(self):
        super().__init__()
        self.calls = 0

    def add_prefix_mapping(self, short_name, uri):
        self.calls += 1
        super().add_prefix_mapping(short_name, uri)


class CountingExtensionRegistry(ExtensionRegistry):
    def __init__(self):
        super().__init__()
        self.calls = 0

    def implement_with(self, type_uri, implementation):
        if type_uri == MODEL_TYPE:
            self.calls += 1
        super().implement_with(type_uri, implementation)


def install_counting_registries(monkeypatch):
    prefixes = CountingPrefixRegistry()
    extensions = CountingExtensionRegistry()
    monkeypatch.setattr(registry_module, "_prefix_registry", prefixes)
    monkeypatch.setattr(registry_module, "_extension_registry", extensions)
    return prefixes, extensions


def test_registers_prefix_and_type(monkeypatch):
    prefixes, extensions = install_counting_registries(monkeypatch)

    ensure_registered()

    assert is_registered()
    assert prefixes.mappings() == {"r2rml": R2RML_URI}
    assert isinstance(extensions.get(MODEL_TYPE), MappingAssembler)


def test_repeated_calls_register_once(monkeypatch):
    prefixes, extensions = install_counting_registries(monkeypatch)

    for _ in range(10):
        ensure_registered()

    assert prefixes.calls == 1
    assert extensions.calls == 1
    assert len(prefixes) == 1
    assert extensions.list_types().count(MODEL_TYPE) == 1


def test_concurrent_first_calls_register_once(monkeypatch):
    prefixes, extensions = install_counting_registries(monkeypatch)
    barrier = threading.Barrier(16)

    def worker():
        barrier.wait()
        ensure_registered()

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert prefixes.calls == 1
    assert extensions.calls == 1
    assert extensions.list_types().count(MODEL_TYPE) == 1


def test_registration_failure_is_logged_not_raised(monkeypatch, caplog):
    prefixes, extensions = install_counting_registries(monkeypatch)
    extensions.implement_with(MODEL_TYPE, FixedGraphOpener(None))

    ensure_registered()

    assert not is_registered()
    assert "Failed to register" in caplog.text


def test_failed_registration_retried_on_next_call(monkeypatch):
    prefixes, extensions = install_counting_registries(monkeypatch)
    attempts = []

    def flaky(type_uri, implementation):
        attempts.append(type_uri)
        if len(attempts) == 1:
            raise RegistrationFailed("registry busy")
        ExtensionRegistry.implement_with(extensions, type_uri, implementation)

    monkeypatch.setattr(extensions, "implement_with", flaky)

    ensure_registered()
    assert not is_registered()

    ensure_registered()
    assert is_registered()
    assert len(prefixes) == 1
    assert isinstance(extensions.get(MODEL_TYPE), MappingAssembler)


def test_unexpected_registry_error_is_logged(monkeypatch, caplog):
    prefixes, _ = install_counting_registries(monkeypatch)

    def broken(short_name, uri):
        raise KeyError(short_name)

    monkeypatch.setattr(prefixes, "add_prefix_mapping", broken)

    ensure_registered()

    assert not is_registered()
    assert "Failed to register" in caplog.text
