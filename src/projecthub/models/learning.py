"""Pydantic models for learning paths and per-user progress."""

from pydantic import Field

from projecthub.models.common import CamelModel


class Module(CamelModel):
    module_id: str | None = None
    title: str
    description: str = ""
    video_url: str | None = None
    content: str = ""


class LearningPath(CamelModel):
    path_id: str
    title: str
    description: str
    duration: str
    category: str
    is_locked: bool = False
    modules: list[Module] = Field(default_factory=list)

    model_config = {"from_attributes": True}

    def with_module_ids(self) -> "LearningPath":
        """Return a copy where every module has an id (``{pathId}-module-{index}``)."""
        modules = [
            module if module.module_id else module.model_copy(update={"module_id": f"{self.path_id}-module-{index}"})
            for index, module in enumerate(self.modules)
        ]
        return self.model_copy(update={"modules": modules})


class ModuleCompletion(CamelModel):
    path_id: str = Field(min_length=1)
    module_id: str = Field(min_length=1)
    completed: bool


class LearningProgress(CamelModel):
    user_id: str
    path_id: str
    completed_modules: list[str] = Field(default_factory=list)
