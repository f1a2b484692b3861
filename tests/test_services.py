# --------------------------------------------------------------
# File: test_services.py
# Description: Pruebas de la fachada CryptoManager y del adaptador de servicios.
# --------------------------------------------------------------

import base64

import pytest

from api import services
from cryptomanager import CryptoManager, IntegrityError


def test_manager_uses_configured_costs(manager):
    """La fachada cifra y verifica con los costes de su configuración."""
    package = manager.encrypt("hello", "s3cret")
    assert manager.decrypt(package, "s3cret") == "hello"
    with pytest.raises(IntegrityError):
        manager.decrypt(package, "wrong")

    stored = manager.hash_password("pw")
    assert manager.verify_password("pw", stored)
    assert not manager.verify_password("otra", stored)


def test_manager_is_safe_across_threads(manager):
    """Llamadas concurrentes no comparten estado."""
    from concurrent.futures import ThreadPoolExecutor

    texts = [f"mensaje {i}" for i in range(8)]
    with ThreadPoolExecutor(max_workers=4) as pool:
        packages = list(pool.map(lambda t: manager.encrypt(t, "s"), texts))
        recovered = list(pool.map(lambda p: manager.decrypt(p, "s"), packages))
    assert recovered == texts


@pytest.mark.usefixtures("fast_services")
def test_encrypt_decrypt_text_success():
    ok, msg, package = services.encrypt_text("hola", "clave")
    assert ok, msg
    assert base64.b64decode(package)

    ok2, msg2, plaintext = services.decrypt_text("  " + package + "\n", "clave")
    assert ok2, msg2
    assert plaintext == "hola"


@pytest.mark.usefixtures("fast_services")
def test_decrypt_text_reports_integrity_failure():
    _, _, package = services.encrypt_text("hola", "clave")
    ok, msg, plaintext = services.decrypt_text(package, "otra")
    assert not ok
    assert plaintext == ""
    assert msg.startswith("Decrypt failed: IntegrityError")


@pytest.mark.usefixtures("fast_services")
def test_decrypt_text_reports_decode_failure():
    ok, msg, plaintext = services.decrypt_text("esto no es base64", "clave")
    assert not ok
    assert "DecodeError" in msg
    assert plaintext == ""


@pytest.mark.usefixtures("fast_services")
def test_encrypt_text_reports_internal_failure():
    ok, msg, package = services.encrypt_text("\udc80", "clave")
    assert not ok
    assert "InternalError" in msg
    assert package == ""


@pytest.mark.usefixtures("fast_services")
def test_hash_and_verify_secret():
    ok, _, stored = services.hash_secret("pw")
    assert ok
    assert services.verify_secret("pw", stored) == (True, "La contraseña coincide.", True)
    ok2, _, match = services.verify_secret("otra", stored)
    assert ok2 and match is False


@pytest.mark.usefixtures("fast_services")
@pytest.mark.parametrize("stored", ["not-base64", "", None])
def test_verify_secret_never_fails(stored):
    ok, _, match = services.verify_secret("pw", stored)
    assert ok
    assert match is False


def test_use_manager_none_restores_environment_manager():
    services.use_manager(None)
    assert isinstance(services._manager(), CryptoManager)
    assert services._manager().settings.encrypt_iterations >= 100_000
    services.use_manager(None)
