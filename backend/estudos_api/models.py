"""SQLModel data models.

This module defines the application's database tables using SQLModel.
Each class is the table descriptor for one entity: table name, column
names and lengths, and how the primary key is generated.

The student/course association lives only in the `Enrollment` join
table. Neither side carries a mirrored collection; lookups in either
direction go through `repositories.EnrollmentRepository`.
"""

from typing import Optional
from datetime import datetime
from sqlalchemy import Column, DateTime, Integer, Sequence, String
from sqlmodel import SQLModel, Field


class Client(SQLModel, table=True):
    """A customer record exposed under `/clientes`."""
    __tablename__ = "cliente"

    id: Optional[int] = Field(default=None, primary_key=True)
    nome: Optional[str] = None
    email: Optional[str] = None


class Product(SQLModel, table=True):
    """A catalogue item exposed under `/produtos`."""
    __tablename__ = "produto"

    id: Optional[int] = Field(default=None, primary_key=True)
    nome: Optional[str] = None
    preco: Optional[float] = None


class Student(SQLModel, table=True):
    """A student (`aluno`).

    Fields:
    - `id`: drawn from the `aluno_sequence` sequence where the store
      supports sequences; plain integer key generation otherwise
    - `nome`: full name, stored in column `nome_completo` (max 100 chars)
    """
    __tablename__ = "tb_alunos"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, Sequence("aluno_sequence", increment=1), primary_key=True),
    )
    nome: Optional[str] = Field(default=None, sa_column=Column("nome_completo", String(100)))
    email: Optional[str] = None
    data_nascimento: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))


class Course(SQLModel, table=True):
    """A course (`curso`); owning side of the enrollment association."""
    __tablename__ = "curso"

    id: Optional[int] = Field(default=None, primary_key=True)
    nome: Optional[str] = None


class Enrollment(SQLModel, table=True):
    """Join row linking one course to one student.

    The (course, student) pair is the primary key, so a pair can only be
    stored once.
    """
    __tablename__ = "matriculas"

    curso_id: Optional[int] = Field(default=None, foreign_key="curso.id", primary_key=True)
    aluno_id: Optional[int] = Field(default=None, foreign_key="tb_alunos.id", primary_key=True)
