# core/seed.py

"""
Sample records loaded at startup. Lost on restart; there is no persistence.
"""

from datetime import date, datetime

from models.enums import NoticeCategory, ResidentStatus, ResidentType, TransactionType


SAMPLE_CONDOS = [
    {
        "id": "c1",
        "name": "Residencial Aurora",
        "address": "Av. das Flores, 123, São Paulo",
        "units_total": 45,
        "manager_name": "Carlos Silva",
        "cnpj": "12.345.678/0001-99",
    },
    {
        "id": "c2",
        "name": "Edifício Horizonte",
        "address": "Rua do Sol, 88, Rio de Janeiro",
        "units_total": 20,
        "manager_name": "Carlos Silva",
        "cnpj": "98.765.432/0001-11",
    },
]

# (condo_id, record)
SAMPLE_RESIDENTS = [
    ("c1", {"id": "r1", "name": "Ana Paula", "cpf": "123.456.789-00", "block": "A", "unit": "101",
            "phone": "(11) 99999-1111", "email": "ana@email.com",
            "type": ResidentType.owner, "status": ResidentStatus.active}),
    ("c1", {"id": "r2", "name": "Roberto Santos", "cpf": "234.567.890-11", "block": "A", "unit": "102",
            "phone": "(11) 99999-2222", "email": "beto@email.com",
            "type": ResidentType.tenant, "status": ResidentStatus.active}),
    ("c2", {"id": "r3", "name": "Mariana Costa", "cpf": "345.678.901-22", "block": "Único", "unit": "501",
            "phone": "(21) 98888-3333", "email": "mari@email.com",
            "type": ResidentType.owner, "status": ResidentStatus.active}),
    # Awaiting manager approval
    ("c1", {"id": "r4", "name": "Lucas Pendente", "cpf": "999.888.777-66", "block": "B", "unit": "202",
            "phone": "(11) 90000-0000", "email": "lucas@email.com",
            "type": ResidentType.resident, "status": ResidentStatus.pending}),
]

SAMPLE_PROVIDERS = [
    ("c1", {"id": "p1", "name": "João Eletricista", "specialty": "Elétrica", "phone": "(11) 97777-0000",
            "email": "joao@servicos.com", "company": "JM Elétrica", "active": True}),
    ("c1", {"id": "p2", "name": "Clean Pool", "specialty": "Piscina", "phone": "(11) 3333-4444",
            "email": "contato@cleanpool.com", "company": "Clean Pool Ltda", "active": True}),
]

SAMPLE_MEETINGS = [
    ("c1", {"id": "m1", "title": "Assembleia Geral Ordinária", "date": datetime(2024, 6, 15, 19, 0),
            "description": "Aprovação de contas",
            "agenda": "1. Leitura da ata anterior\n2. Aprovação de contas 2023\n3. Eleição de subsíndico"}),
    ("c2", {"id": "m2", "title": "Reunião de Obras", "date": datetime(2024, 6, 20, 10, 0),
            "description": "Reforma da fachada", "agenda": "Escolha de fornecedores"}),
]

# Listed oldest first; add_notice prepends so the newest ends up on top.
SAMPLE_NOTICES = [
    ("c1", {"id": "n2", "title": "Festa Junina",
            "message": "Nossa festa será dia 24/06 no salão de festas. Tragam pratos típicos!",
            "date": datetime(2024, 5, 30), "category": NoticeCategory.event, "pinned": False}),
    ("c1", {"id": "n1", "title": "Manutenção do Elevador",
            "message": "O elevador social estará parado para manutenção na terça-feira das 9h às 12h.",
            "date": datetime(2024, 5, 28), "category": NoticeCategory.maintenance, "pinned": True}),
]

# Listed oldest first as well (prepended on load).
SAMPLE_TRANSACTIONS = [
    ("c2", {"id": "t5", "type": TransactionType.income, "amount": 8000, "category": "Taxa Condominial",
            "date": date(2024, 5, 5), "description": "Arrecadação mensal"}),
    ("c1", {"id": "t4", "type": TransactionType.income, "amount": 500, "category": "Multas",
            "date": date(2024, 5, 20), "description": "Multa barulho apto 302"}),
    ("c1", {"id": "t3", "type": TransactionType.expense, "amount": 4500, "category": "Manutenção",
            "date": date(2024, 5, 15), "supplier": "Elevadores Tech", "description": "Reparo motor portão"}),
    ("c1", {"id": "t2", "type": TransactionType.expense, "amount": 1200, "category": "Limpeza",
            "date": date(2024, 5, 10), "supplier": "Clean Service", "description": "Serviço mensal de limpeza"}),
    ("c1", {"id": "t1", "type": TransactionType.income, "amount": 15000, "category": "Taxa Condominial",
            "date": date(2024, 5, 5), "description": "Arrecadação mensal"}),
]

# (condo_id, resident_id, record) in thread order
SAMPLE_CHAT = [
    ("c1", "r1", {"id": "msg1", "content": "Bom dia! Poderia reservar o salão para o dia 20?",
                  "timestamp": datetime(2024, 6, 1, 10, 30), "sent_by_manager": False, "read": True}),
    ("c1", "r1", {"id": "msg2", "content": "Olá Ana, vou verificar a disponibilidade.",
                  "timestamp": datetime(2024, 6, 1, 10, 35), "sent_by_manager": True, "read": True}),
    ("c1", "r1", {"id": "msg3", "content": "Confirmado! Já está reservado.",
                  "timestamp": datetime(2024, 6, 1, 11, 0), "sent_by_manager": True, "read": True}),
    ("c1", "r1", {"id": "msg4", "content": "Muito obrigada!",
                  "timestamp": datetime(2024, 6, 1, 11, 5), "sent_by_manager": False, "read": False}),
    ("c1", "r2", {"id": "msg5", "content": "O portão da garagem está fazendo barulho novamente.",
                  "timestamp": datetime(2024, 6, 2, 8, 0), "sent_by_manager": False, "read": False}),
]


def load_sample_data(store) -> None:
    for condo in SAMPLE_CONDOS:
        store.add_condo(condo)
    for condo_id, record in SAMPLE_RESIDENTS:
        store.add_resident(condo_id, record)
    for condo_id, record in SAMPLE_PROVIDERS:
        store.add_provider(condo_id, record)
    for condo_id, record in SAMPLE_MEETINGS:
        store.add_meeting(condo_id, record)
    for condo_id, record in SAMPLE_NOTICES:
        store.add_notice(condo_id, record)
    for condo_id, record in SAMPLE_TRANSACTIONS:
        store.add_transaction(condo_id, record)
    for condo_id, resident_id, record in SAMPLE_CHAT:
        store.add_message(condo_id, resident_id, record)
