from sqlalchemy.orm import Session
from resource_hub.db.session import SessionLocal
from resource_hub.core.config import settings
from resource_hub.core.logging import logger
from resource_hub.crud.users import get_user_by_login, create_user
from resource_hub.schemas.auth import UserCreateIn
from resource_hub.db.models.user import Role
from resource_hub.crud.categories import list_categories, create_category
from resource_hub.crud.resources import create_resource
from resource_hub.crud.blocks import create_block
from resource_hub.crud.themes import list_themes, create_theme
from resource_hub.schemas.categories import CategoryCreate
from resource_hub.schemas.resources import ResourceCreate
from resource_hub.schemas.blocks import BlockCreate
from resource_hub.schemas.themes import ThemeCreate

DEMO_THEMES = [
    dict(name="Tema Padrão", primary_color="#9D5CFF", background_color="#0C0D13", surface_color="#14151F",
         border_color="#1F2231", text_color="#FFFFFF", is_active=True),
    dict(name="Tema Corporativo", primary_color="#0073E6", background_color="#0F172A", surface_color="#1E293B",
         border_color="#334155", text_color="#F8FAFC", is_active=False),
]

# (name, icon, [(title, description, read_time), ...])
DEMO_CATEGORIES = [
    ("Pré-Evento", "CheckCircle", [
        ("Checklist de Preparação",
         "Todos os itens que você precisa verificar antes do evento para garantir que seu estande esteja perfeito.", 5),
        ("Documentos Obrigatórios",
         "Documentação necessária para participação e montagem do seu estande no evento.", 3),
        ("Orientações de Montagem",
         "Instruções detalhadas para a montagem do seu estande, incluindo regras e cronograma.", 8),
    ]),
    ("Durante o Evento", "Calendar", [
        ("Horários do Evento",
         "Cronograma completo de todas as atividades do evento, incluindo abertura e fechamento.", 2),
        ("Contatos de Emergência",
         "Lista de contatos importantes para solucionar problemas durante o evento.", 1),
    ]),
    ("Materiais de Marketing", "Package", [
        ("Materiais Gráficos", "Logos, banners e templates para suas comunicações sobre o evento.", 4),
        ("Anúncios nas Redes Sociais", "Modelos de posts e textos para divulgação da sua participação no evento.", 6),
    ]),
]

# one block of every type, attached to the first demo resource
DEMO_BLOCKS = [
    ("checklist", "Checklist: O que levar para o evento",
     "Confira se você preparou todos estes itens antes de ir para o evento.",
     {"items": [
         {"id": "1", "text": "Banners e materiais gráficos para o estande", "checked": False},
         {"id": "2", "text": "Cartões de visita e materiais promocionais", "checked": False},
         {"id": "3", "text": "Computadores e dispositivos eletrônicos", "checked": False},
         {"id": "4", "text": "Extensões e adaptadores de energia", "checked": False},
         {"id": "5", "text": "Lista de contatos emergenciais", "checked": False},
     ]}),
    ("alert", "Informação Importante", None,
     {"content": "Não esqueça que a montagem do seu estande deve ser concluída até 18:00h do dia anterior "
                 "ao início do evento. Estandes incompletos não poderão participar.",
      "type": "warning"}),
    ("text", "Informações sobre Estacionamento", None,
     {"content": "O evento disponibiliza estacionamento gratuito para expositores mediante apresentação de "
                 "credencial. O acesso é pela entrada lateral do pavilhão (Portão B)."}),
    ("copyableText", "Código de Acesso Wi-Fi", None, {"content": "EXPOSITOR2023_VIP"}),
    ("fileDownload", "Manual do Expositor", "Download do manual completo com todas as normas e regulamentos.",
     {"filename": "manual_expositor_2023.pdf", "filesize": "2.4 MB", "url": "#"}),
    ("link", "Links Úteis", None,
     {"links": [
         {"url": "#", "text": "Mapa do Local do Evento"},
         {"url": "#", "text": "Lista de Hotéis Parceiros"},
         {"url": "#", "text": "Formulário para Solicitações Especiais"},
     ]}),
    ("video", "Tutorial: Montagem do Estande", "Assista ao vídeo para instruções detalhadas sobre a montagem.",
     {"title": "Tutorial de Montagem de Estande", "duration": "8:24", "thumbnailUrl": "#", "embedUrl": "#"}),
    ("custom", "Programação do Evento", None,
     {"content": "<table><thead><tr><th>Dia</th><th>Horário</th><th>Atividade</th></tr></thead>"
                 "<tbody><tr><td>Dia 1</td><td>08:00 - 09:30</td><td>Credenciamento</td></tr>"
                 "<tr><td>Dia 1</td><td>10:00 - 11:30</td><td>Cerimônia de Abertura</td></tr></tbody></table>",
      "html": True}),
]


def seed_content(db: Session) -> None:
    if not list_themes(db):
        for theme in DEMO_THEMES:
            create_theme(db, ThemeCreate(**theme))
    if list_categories(db):
        return
    first_resource = None
    for name, icon, resources in DEMO_CATEGORIES:
        c = create_category(db, CategoryCreate(name=name, icon=icon))
        for title, description, read_time in resources:
            r = create_resource(db, ResourceCreate(
                title=title, description=description, category_id=c.id, read_time=read_time,
            ))
            first_resource = first_resource or r
    for order, (block_type, title, description, content) in enumerate(DEMO_BLOCKS):
        create_block(db, BlockCreate(
            resource_id=first_resource.id,
            block_type=block_type,
            title=title,
            description=description,
            content=content,
            order=order,
        ))
    logger.info("demo_content_seeded", categories=len(DEMO_CATEGORIES), blocks=len(DEMO_BLOCKS))


def seed_demo():
    db: Session = SessionLocal()
    try:
        if settings.DEMO_ADMIN_LOGIN and settings.DEMO_ADMIN_PASSWORD:
            u = get_user_by_login(db, settings.DEMO_ADMIN_LOGIN)
            if not u:
                create_user(db, UserCreateIn(
                    login=settings.DEMO_ADMIN_LOGIN,
                    password=settings.DEMO_ADMIN_PASSWORD,
                    role=Role.admin,
                    full_name="Demo Admin",
                ))
        seed_content(db)
    finally:
        db.close()
