from sqlalchemy import Column, Integer, MetaData, String, Table, Text

metadata = MetaData()

# Имена колонок в нижнем регистре (docid/userid), как у таблицы, созданной без кавычек;
# ключи docId/userId используются в запросах и в строках результата
documents = Table(
    "documents",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("content", Text, nullable=True),
    Column("docid", String(255), key="docId", nullable=True),
    Column("userid", String(255), key="userId", nullable=True),
    sqlite_autoincrement=True,
)

DOCUMENT_COLUMNS = (
    documents.c.id,
    documents.c.content,
    documents.c.docId.label("docId"),
    documents.c.userId.label("userId"),
)
