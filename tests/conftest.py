# File: tests/conftest.py
# Contains pytest fixtures with a small DMMF document used by the graph tests.

import copy
from typing import Any, Dict, List

import pytest

from dmmf_graph.config import GeneratorConfig


def scalar(name: str, type_: str, **extra: Any) -> Dict[str, Any]:
    return {"name": name, "kind": "scalar", "type": type_, "isRequired": True, **extra}


def relation(name: str, type_: str, **extra: Any) -> Dict[str, Any]:
    return {"name": name, "kind": "object", "type": type_, "relationName": f"{type_}Rel", **extra}


def enum_field(name: str, type_: str, **extra: Any) -> Dict[str, Any]:
    return {"name": name, "kind": "enum", "type": type_, "isRequired": True, **extra}


def arg(name: str, *types: str, required: bool = False, list_types: List[str] = ()) -> Dict[str, Any]:
    return {
        "name": name,
        "isRequired": required,
        "isNullable": False,
        "inputTypes": [
            {"type": t, "location": "inputObjectTypes", "isList": t in list_types} for t in types
        ],
    }


def action(name: str, output: str, *args: Dict[str, Any], is_list: bool = False,
           location: str = "outputObjectTypes") -> Dict[str, Any]:
    return {
        "name": name,
        "isNullable": False,
        "outputType": {"type": output, "location": location, "isList": is_list},
        "args": list(args),
    }


RAW_DMMF: Dict[str, Any] = {
    "datamodel": {
        "models": [
            {
                "name": "User",
                "dbName": "users",
                "documentation": "A user @zod.import([\"import { isEmail } from 'validator'\"])",
                "primaryKey": None,
                "uniqueFields": [["email"]],
                "uniqueIndexes": [{"name": None, "fields": ["email"]}],
                "fields": [
                    scalar("id", "Int", isId=True, hasDefaultValue=True),
                    scalar("email", "String", isUnique=True),
                    scalar("password", "String", omit=["input"]),
                    enum_field("role", "Role"),
                    scalar("metadata", "Json", isRequired=False),
                    relation("posts", "Post", isList=True),
                    relation("profile", "UserProfile"),
                ],
            },
            {
                "name": "UserProfile",
                "fields": [
                    scalar("id", "Int", isId=True),
                    scalar("balance", "Decimal"),
                    scalar("userId", "Int"),
                    relation("user", "User", isRequired=True),
                ],
            },
            {
                "name": "Post",
                "fields": [
                    scalar("id", "Int", isId=True),
                    scalar("title", "String"),
                    enum_field("status", "Status"),
                    scalar("updatedAt", "DateTime", isUpdatedAt=True),
                ],
            },
        ],
        "enums": [
            {"name": "Role", "values": [{"name": "ADMIN"}, {"name": "MEMBER"}]},
            {"name": "Status", "values": [{"name": "DRAFT"}, {"name": "PUBLISHED"}]},
        ],
    },
    "schema": {
        "outputObjectTypes": {
            "prisma": [
                {
                    "name": "Query",
                    "fields": [
                        action("findUniqueUser", "User",
                               arg("where", "UserWhereUniqueInput", required=True)),
                        action("findUniqueUserOrThrow", "User",
                               arg("where", "UserWhereUniqueInput", required=True)),
                        action("findManyUser", "User",
                               arg("where", "UserWhereInput"),
                               arg("orderBy", "UserOrderByWithRelationInput",
                                   "UserOrderByWithRelationInput",
                                   list_types=["UserOrderByWithRelationInput"]),
                               arg("take", "Int"),
                               is_list=True),
                        action("findManyUserProfile", "UserProfile",
                               arg("where", "UserProfileWhereInput"), is_list=True),
                        action("aggregatePost", "AggregatePost", arg("where", "PostWhereInput")),
                    ],
                },
                {
                    "name": "Mutation",
                    "fields": [
                        action("createOneUser", "User",
                               arg("data", "UserCreateInput", "UserUncheckedCreateInput",
                                   required=True)),
                        action("upsertOneUser", "User",
                               arg("where", "UserWhereUniqueInput", required=True),
                               arg("create", "UserCreateInput", required=True),
                               arg("update", "UserUpdateInput", required=True)),
                        action("createManyUser", "AffectedRowsOutput",
                               arg("data", "UserCreateManyInput", required=True,
                                   list_types=["UserCreateManyInput"]),
                               arg("skipDuplicates", "Boolean")),
                        action("deleteOnePost", "Post",
                               arg("where", "PostWhereUniqueInput", required=True)),
                        action("executeRaw", "Json",
                               arg("query", "String", required=True), location="scalar"),
                    ],
                },
                {
                    "name": "AggregatePost",
                    "fields": [action("_count", "PostCountAggregateOutputType")],
                },
            ],
        },
    },
}


@pytest.fixture
def raw_dmmf() -> Dict[str, Any]:
    """A fresh deep copy of the sample DMMF document, safe to mutate per test."""
    return copy.deepcopy(RAW_DMMF)


@pytest.fixture
def config() -> GeneratorConfig:
    return GeneratorConfig()
