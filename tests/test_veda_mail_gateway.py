import types
import pytest
from unittest.mock import MagicMock
from contract_notifier.adapters.driven.veda_mail_gateway import VedaMailGateway, to_individual
from contract_notifier.domain.entities import Letter, MailObject
from contract_notifier.domain.errors import LoadError, TemplateNotFound

MODULE = "contract_notifier.adapters.driven.veda_mail_gateway"


def _patch_settings(monkeypatch, **overrides):
    base = dict(MAIL_SENDER="d:mailbox", MAIL_SAVE=False)
    base.update(overrides)
    monkeypatch.setattr(f"{MODULE}.settings", types.SimpleNamespace(**base), raising=True)


def test_get_template_reads_subject_and_body():
    client = MagicMock()
    client.get_individual.return_value = {
        "@": "tpl:executor",
        "v-s:notificationSubject": [{"data": "{{app_name}}", "type": "String"}],
        "v-s:notificationBody": [{"data": "{{contract_list}}", "type": "String"}],
    }
    letter = VedaMailGateway(client).get_template("tpl:executor")
    assert letter == Letter(subject="{{app_name}}", body="{{contract_list}}")


def test_get_template_missing_raises_template_not_found():
    client = MagicMock()
    client.get_individual.side_effect = LoadError("tpl:x", "não encontrado")
    with pytest.raises(TemplateNotFound) as exc:
        VedaMailGateway(client).get_template("tpl:x")
    assert exc.value.key == "tpl:x"


def test_get_template_without_text_raises_template_not_found():
    client = MagicMock()
    client.get_individual.return_value = {"@": "tpl:x"}
    with pytest.raises(TemplateNotFound):
        VedaMailGateway(client).get_template("tpl:x")


def test_prepare_letter_does_not_save_by_default(monkeypatch):
    _patch_settings(monkeypatch)
    client = MagicMock()
    mail = VedaMailGateway(client).prepare_letter("d:ann", Letter(subject="s", body="b"))
    assert mail.recipient == "d:ann"
    assert mail.sender == "d:mailbox"
    assert mail.id.startswith("d:mail_")
    client.put_individual.assert_not_called()


def test_prepare_letter_saves_when_enabled(monkeypatch):
    _patch_settings(monkeypatch, MAIL_SAVE=True)
    client = MagicMock()
    mail = VedaMailGateway(client).prepare_letter("d:ann", Letter(subject="s", body="b"))
    client.put_individual.assert_called_once()
    saved = client.put_individual.call_args.args[0]
    assert saved["@"] == mail.id
    assert saved["v-wf:to"] == [{"data": "d:ann", "type": "Uri"}]


def test_to_individual_shape():
    ind = to_individual(MailObject(id="d:m1", recipient="d:ann", subject="s", body="b", sender="d:box"))
    assert ind["rdf:type"] == [{"data": "v-s:Email", "type": "Uri"}]
    assert ind["v-s:subject"][0]["data"] == "s"
    assert ind["v-s:messageBody"][0]["data"] == "b"
    assert ind["v-s:senderMailbox"] == [{"data": "d:box", "type": "Uri"}]
