from sqlalchemy.orm import declarative_base

# Base для моделей
Base = declarative_base()

# предел BigInteger: суммы и количества больше этого в базу не влезут
MAX_AMOUNT = 2 ** 63 - 1
