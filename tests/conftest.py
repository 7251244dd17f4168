import pytest
from contract_notifier.domain.entities import ContractRole, Document, Letter, MailObject
from contract_notifier.domain.errors import LoadError, TemplateNotFound
from contract_notifier.domain.ports import DirectoryGateway, MailGateway, TemplateRenderer

ROOT = "d:org_root"
CONTROLLER = "d:contract_controller_role"


class FakeDirectory(DirectoryGateway):
    """Diretório em memória: documentos, quem é válido e quem pertence à raiz."""

    def __init__(self, docs=(), valid=(), in_root=(), broken=(), chiefs=None, stored=()):
        self.docs = {d.uri: d for d in docs}
        self.valid = set(valid)
        self.in_root = set(in_root)
        self.broken = set(broken)
        self.chiefs = dict(chiefs or {})
        self.stored = list(stored)
        self.loads = []

    def load_document(self, uri):
        self.loads.append(uri)
        if uri in self.broken or uri not in self.docs:
            raise LoadError(uri, "não encontrado")
        return self.docs[uri]

    def is_individual_valid(self, document):
        return document.uri in self.valid

    def is_sub_unit_of(self, department, root_uri):
        return department.uri in self.in_root

    def get_department_chief(self, department):
        return self.chiefs.get(department.uri)

    def run_stored_query(self):
        return list(self.stored)


class FakeMail(MailGateway):
    def __init__(self, templates=None):
        self.templates = dict(templates or {})
        self.prepared = []

    def get_template(self, key):
        if key not in self.templates:
            raise TemplateNotFound(key)
        return self.templates[key]

    def prepare_letter(self, recipient_uri, letter):
        mail = MailObject(id=f"d:mail_{len(self.prepared) + 1}", recipient=recipient_uri,
                          subject=letter.subject, body=letter.body)
        self.prepared.append(mail)
        return mail


class MustacheLikeRenderer(TemplateRenderer):
    """Substitui {{chave}} e escapa '/' como o Mustache faz."""

    def render(self, template, view):
        out = template
        for k, v in view.items():
            out = out.replace("{{" + k + "}}", str(v).replace("/", "&#x2F;"))
        return out


def contract(uri="d:c1", executor=None, supporter=None, manager=None, department=None, number=None):
    props = {}
    for role, value in (
        (ContractRole.EXECUTOR, executor),
        (ContractRole.SUPPORTER, supporter),
        (ContractRole.MANAGER, manager),
        (ContractRole.DEPARTMENT, department),
    ):
        if value is not None:
            props[role.value] = value if isinstance(value, tuple) else (value,)
    if number is not None:
        props["v-s:registrationNumber"] = (number,)
    return Document(uri=uri, props=props)


def person(uri):
    return Document(uri=uri, props={})


@pytest.fixture
def fake_directory():
    return FakeDirectory


@pytest.fixture
def fake_mail():
    return FakeMail


@pytest.fixture
def renderer():
    return MustacheLikeRenderer()


@pytest.fixture
def make_contract():
    return contract


@pytest.fixture
def make_person():
    return person


@pytest.fixture
def letter():
    return Letter(subject="{{app_name}}: contratos", body="Contratos:\n{{contract_list}}")
