# -*- coding: utf-8 -*-
"""
QuizService/src/domain/models.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
SQLAlchemy 2.0 ORM models for the quiz domain.

Tables: ``words``, ``questions``, ``tests``, ``test_questions`` (ordered
links between a test and its questions) and ``results`` (per-user progress
on a test).
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from sqlalchemy import (JSON, Boolean, DateTime, ForeignKey, Integer, String,
                        Text, UniqueConstraint, false, func)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Базовый класс для всех моделей."""


class Word(Base):
    """Словарная статья, на которую может ссылаться вопрос."""

    __tablename__ = "words"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    word: Mapped[str] = mapped_column(String(255), nullable=False)
    meaning: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class Question(Base):
    """Вопрос: текст или ссылка на слово, варианты ответов и индекс верного."""

    __tablename__ = "questions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    text: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    word_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("words.id", ondelete="SET NULL"), nullable=True, index=True
    )
    answers: Mapped[List[Any]] = mapped_column(JSON, nullable=False, default=list)
    correct_answer: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    word: Mapped[Optional[Word]] = relationship(Word, lazy="raise")


class Test(Base):
    """Тест: метаданные и упорядоченный список ссылок на вопросы."""

    __tablename__ = "tests"
    __mapper_args__ = {"eager_defaults": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    image: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)
    is_public: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false(), index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), onupdate=func.now(), nullable=True
    )

    question_links: Mapped[List["TestQuestion"]] = relationship(
        back_populates="test",
        order_by="TestQuestion.position",
        cascade="all, delete-orphan",
        lazy="raise",
    )

    @property
    def question_ids(self) -> List[int]:
        """ID вопросов в порядке теста (повторы сохраняются)."""
        return [link.question_id for link in self.question_links]


class TestQuestion(Base):
    """Позиция вопроса в тесте. Один вопрос может встречаться несколько раз."""

    __tablename__ = "test_questions"

    test_id: Mapped[int] = mapped_column(
        ForeignKey("tests.id", ondelete="CASCADE"), primary_key=True
    )
    position: Mapped[int] = mapped_column(Integer, primary_key=True)
    question_id: Mapped[int] = mapped_column(
        ForeignKey("questions.id", ondelete="CASCADE"), nullable=False, index=True
    )

    test: Mapped[Test] = relationship(back_populates="question_links", lazy="raise")
    question: Mapped[Question] = relationship(Question, lazy="raise")


class Result(Base):
    """Прогресс пользователя по тесту. Не более одной записи на пару (user, test)."""

    __tablename__ = "results"
    __table_args__ = (
        UniqueConstraint("user_id", "test_id", name="uq_results_user_test"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    test_id: Mapped[int] = mapped_column(
        ForeignKey("tests.id", ondelete="CASCADE"), nullable=False, index=True
    )
    answers: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    score: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), onupdate=func.now(), nullable=True
    )
