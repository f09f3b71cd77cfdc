"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Un body con forma inesperada falla en el borde (ValidationError) en vez de
  propagar un campo ausente hasta el registro final.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
- Todos son inmutables (frozen): cada fetch produce un registro nuevo que el
  merge consume una sola vez.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Person(BaseModel):
    """Sujeto principal tal como lo devuelve `/people/{id}/`.

    Solo se declaran los campos que usa el merge; el resto se ignora.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(
        ...,
        description="Nombre del personaje.",
    )
    height: str = Field(
        ...,
        description="Altura en centímetros, como texto (la API devuelve strings).",
    )
    gender: str = Field(
        ...,
        description="Género tal cual lo reporta la API (ver `Gender`).",
    )
    homeworld: str = Field(
        ...,
        description="URL absoluta del planeta natal.",
    )
    films: list[str] = Field(
        default_factory=list,
        description="URLs absolutas de las películas, en el orden de la API.",
    )


class Planet(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(..., description="Nombre del planeta.")


class Film(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    title: str = Field(..., description="Título de la película.")
    director: str = Field(..., description="Director/a.")
    release_date: str = Field(..., description="Fecha de estreno (ISO-8601).")

    def summary(self) -> FilmSummary:
        """Proyección sin transformar los valores."""

        return FilmSummary(
            title=self.title,
            director=self.director,
            release_date=self.release_date,
        )


class FilmSummary(BaseModel):
    """Proyección de `Film` que aparece en el registro final."""

    model_config = ConfigDict(frozen=True)

    title: str
    director: str
    release_date: str


class PersonInfo(BaseModel):
    """Registro desnormalizado: persona + nombre del planeta + películas.

    Invariante:
    - `films` tiene la misma longitud y el mismo orden que `Person.films`.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Nombre del personaje.")
    height: str = Field(..., description="Altura (texto, sin convertir).")
    gender: str = Field(..., description="Género, copiado literalmente de `Person`.")
    homeworld: str = Field(..., description="Nombre del planeta natal.")
    films: list[FilmSummary] = Field(
        default_factory=list,
        description="Películas en el mismo orden que las referencias de origen.",
    )
