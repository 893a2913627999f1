from sqlalchemy import Column, DateTime, Float, Integer, String, func

from concessionaria.database import Base


class Vehicle(Base):
    __tablename__ = "veiculos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    modelo = Column(String, nullable=False)
    marca = Column(String, nullable=False)
    ano = Column(Integer, nullable=False)
    preco = Column(Float, nullable=False)
    descricao = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=True)
