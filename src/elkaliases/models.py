"""Typed desired-state, request and response models"""

# pylint: disable=R0903
import json
import typing as t
from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator
from .utils import load_json


def check_json(value: str, field: str) -> str:
    """Raise ValueError if ``value`` is not well-formed JSON. Never interpreted"""
    try:
        json.loads(value)
    except ValueError as err:
        raise ValueError(f'{field} is not valid JSON: {err}') from err
    return value


def single_block(value: t.Any, kind: str) -> t.Any:
    """
    Accept either a mapping or the single-element list form of a nested block.

    Hosts that model nested blocks as lists (``MaxItems: 1``) hand over
    ``[{...}]``. More than one element is a configuration error.
    """
    if isinstance(value, (list, tuple)):
        if len(value) > 1:
            raise ValueError(f'Too many {kind} blocks: {len(value)}. Only 1 allowed')
        return value[0] if value else None
    return value


def unique_names(aliases: t.Sequence['Alias']) -> t.Sequence['Alias']:
    """Raise ValueError when alias names repeat"""
    seen = set()
    for alias in aliases:
        if alias.name in seen:
            raise ValueError(f'Duplicate alias name: "{alias.name}"')
        seen.add(alias.name)
    return aliases


# Desired state


class Alias(BaseModel):
    """An alias name with an optional filter query, carried as a JSON string"""

    model_config = ConfigDict(extra='forbid')

    name: str = Field(min_length=1)
    filter: t.Optional[str] = None

    @field_validator('filter', mode='before')
    @classmethod
    def empty_filter(cls, value):
        """An empty filter string is the same as no filter"""
        return value or None

    @field_validator('filter')
    @classmethod
    def filter_is_json(cls, value):
        if value is not None:
            check_json(value, 'filter')
        return value

    @property
    def raw_filter(self) -> t.Any:
        """The filter as raw JSON, or None"""
        return load_json(self.filter)


class DataStream(BaseModel):
    """Data stream descriptor of an index template"""

    model_config = ConfigDict(extra='forbid')

    allow_custom_routing: bool = False
    hidden: bool = False

    @field_validator('allow_custom_routing', 'hidden', mode='before')
    @classmethod
    def unset_is_false(cls, value):
        return False if value is None else value


class Template(BaseModel):
    """Template body: mappings, settings and aliases"""

    model_config = ConfigDict(extra='forbid')

    mappings: str
    settings: str
    alias: t.List[Alias] = Field(default_factory=list)

    @field_validator('mappings', 'settings')
    @classmethod
    def body_is_json(cls, value, info):
        return check_json(value, info.field_name)

    @field_validator('alias', mode='before')
    @classmethod
    def none_is_empty(cls, value):
        return [] if value is None else value

    @field_validator('alias')
    @classmethod
    def alias_names(cls, value):
        return unique_names(value)


class IndexTemplate(BaseModel):
    """Desired state of a composable index template"""

    model_config = ConfigDict(extra='forbid')

    name: str = Field(min_length=1)
    index_patterns: t.List[str] = Field(min_length=1)
    data_stream: t.Optional[DataStream] = None
    template: Template
    composed_of: t.List[str] = Field(default_factory=list)

    @field_validator('data_stream', mode='before')
    @classmethod
    def one_data_stream(cls, value):
        return single_block(value, 'data_stream')

    @field_validator('template', mode='before')
    @classmethod
    def one_template(cls, value):
        return single_block(value, 'template')

    @field_validator('composed_of', mode='before')
    @classmethod
    def none_is_empty(cls, value):
        return [] if value is None else value

    def to_request(self) -> 'PutIndexTemplateRequest':
        """Build the put index template request body"""
        data_stream = None
        if self.data_stream is not None:
            data_stream = DataStreamBody(**self.data_stream.model_dump())
        return PutIndexTemplateRequest(
            index_patterns=self.index_patterns,
            template=TemplateBody(
                mappings=load_json(self.template.mappings),
                settings=load_json(self.template.settings),
                aliases={
                    alias.name: AliasBody(filter=alias.raw_filter)
                    for alias in self.template.alias
                },
            ),
            composed_of=self.composed_of,
            data_stream=data_stream,
        )


class AliasSet(BaseModel):
    """Desired state of the aliases attached to one index or data stream"""

    model_config = ConfigDict(extra='forbid')

    index: str = Field(min_length=1)
    alias: t.List[Alias] = Field(min_length=1)

    @field_validator('alias')
    @classmethod
    def alias_names(cls, value):
        return unique_names(value)


# Requests


class AliasBody(BaseModel):
    """Alias entry of an index template body"""

    filter: t.Any = None

    def payload(self) -> t.Dict[str, t.Any]:
        """The alias object. A missing filter is left out, never sent as null"""
        return {} if self.filter is None else {'filter': self.filter}


class TemplateBody(BaseModel):
    """``template`` object of a put index template request"""

    mappings: t.Any = None
    settings: t.Any = None
    aliases: t.Dict[str, AliasBody] = Field(default_factory=dict)

    def payload(self) -> t.Dict[str, t.Any]:
        """The template object. ``aliases`` is always present, even when empty"""
        return {
            'mappings': self.mappings,
            'settings': self.settings,
            'aliases': {name: body.payload() for name, body in self.aliases.items()},
        }


class DataStreamBody(BaseModel):
    """``data_stream`` object of a put index template request"""

    allow_custom_routing: bool = False
    hidden: bool = False


class PutIndexTemplateRequest(BaseModel):
    """Body of ``PUT _index_template/<name>``"""

    index_patterns: t.List[str]
    template: TemplateBody
    composed_of: t.List[str] = Field(default_factory=list)
    data_stream: t.Optional[DataStreamBody] = None

    def kwargs(self) -> t.Dict[str, t.Any]:
        """
        Keyword arguments for ``indices.put_index_template``.

        ``composed_of`` is always sent, as an empty list when there is nothing
        to compose. ``data_stream`` is only sent when one was declared.
        """
        retval = {
            'index_patterns': list(self.index_patterns),
            'template': self.template.payload(),
            'composed_of': list(self.composed_of),
        }
        if self.data_stream is not None:
            retval['data_stream'] = self.data_stream.model_dump()
        return retval


class AliasActionBody(BaseModel):
    """Target of a single alias action"""

    index: str
    alias: str
    filter: t.Any = None

    def payload(self) -> t.Dict[str, t.Any]:
        retval = {'index': self.index, 'alias': self.alias}
        if self.filter is not None:
            retval['filter'] = self.filter
        return retval


class AliasAction(BaseModel):
    """One ``add`` or ``remove`` directive of ``POST _aliases``"""

    add: t.Optional[AliasActionBody] = None
    remove: t.Optional[AliasActionBody] = None

    @classmethod
    def add_alias(cls, index: str, alias: Alias) -> 'AliasAction':
        """Build an ``add`` directive. The filter travels as raw JSON"""
        return cls(
            add=AliasActionBody(index=index, alias=alias.name, filter=alias.raw_filter)
        )

    @classmethod
    def remove_alias(cls, index: str, name: str) -> 'AliasAction':
        """Build a ``remove`` directive"""
        return cls(remove=AliasActionBody(index=index, alias=name))

    def payload(self) -> t.Dict[str, t.Any]:
        if self.add is not None:
            return {'add': self.add.payload()}
        return {'remove': self.remove.payload()}


class UpdateAliasesRequest(BaseModel):
    """Body of ``POST _aliases``"""

    actions: t.List[AliasAction]

    def kwargs(self) -> t.Dict[str, t.Any]:
        """Keyword arguments for ``indices.update_aliases``"""
        return {'actions': [action.payload() for action in self.actions]}


# Responses


class TemplateDetail(BaseModel):
    """``template`` object of a get index template response"""

    mappings: t.Any = None
    settings: t.Any = None
    aliases: t.Dict[str, t.Dict[str, t.Any]] = Field(default_factory=dict)


class IndexTemplateDetail(BaseModel):
    """``index_template`` object of a get index template response"""

    index_patterns: t.List[str] = Field(default_factory=list)
    composed_of: t.List[str] = Field(default_factory=list)
    data_stream: t.Optional[t.Dict[str, t.Any]] = None
    template: t.Optional[TemplateDetail] = None

    @field_validator('index_patterns', mode='before')
    @classmethod
    def pattern_list(cls, value):
        return [value] if isinstance(value, str) else value


class IndexTemplateItem(BaseModel):
    """One entry of ``index_templates``"""

    name: str
    index_template: IndexTemplateDetail


class GetIndexTemplateResponse(BaseModel):
    """Body of ``GET _index_template/<name>``"""

    index_templates: t.List[IndexTemplateItem] = Field(default_factory=list)

    def find(self, name: str) -> t.Optional[IndexTemplateDetail]:
        """Return the template named ``name``, or None"""
        for item in self.index_templates:
            if item.name == name:
                return item.index_template
        return None


class IndexAliases(BaseModel):
    """Aliases of one index in a get alias response"""

    aliases: t.Dict[str, t.Dict[str, t.Any]] = Field(default_factory=dict)


class GetAliasResponse(RootModel[t.Dict[str, IndexAliases]]):
    """Body of ``GET <index>/_alias``, keyed by index name"""

    def find(self, index: str) -> t.Optional[IndexAliases]:
        """Return the aliases attached to ``index``, or None"""
        return self.root.get(index)
