"""Root GraphQL schema for the forest patrimony API."""

import graphene

from .importing.schema import PatrimonyImportMutations, PatrimonyImportQuery


class Query(PatrimonyImportQuery, graphene.ObjectType):
    pass


class Mutation(PatrimonyImportMutations, graphene.ObjectType):
    pass


schema = graphene.Schema(query=Query, mutation=Mutation)
