"""
AWS DynamoDB Movies Table Example

Reads every movie of a year from the "Movies" table of the official AWS
DynamoDB Getting Started guide:
https://docs.aws.amazon.com/amazondynamodb/latest/developerguide/GettingStartedDynamoDB.html
"""

import logging

import boto3
from boto3.dynamodb.conditions import Attr, Key

from dynapage import ClientFetcher, QueryAllOptions, ResultMode, TableFetcher, query_all

logging.basicConfig(level=logging.INFO)

table = boto3.resource("dynamodb").Table("Movies")

# Collect everything released in 2013
result = query_all(TableFetcher(table), {"KeyConditionExpression": Key("year").eq(2013)})
print(f"{result.count} movies from 2013 in {result.pages} pages")
for movie in result.items or []:
    print(f"  {movie['title']}")

# Stream well rated movies without keeping them in memory
result = query_all(
    TableFetcher(table),
    {
        "KeyConditionExpression": Key("year").eq(2013),
        "FilterExpression": Attr("rating").gte(8),
        "Limit": 25,
    },
    QueryAllOptions(
        on_each_item=lambda movie: print(f"  {movie['title']}: {movie['rating']}"),
        result_mode=ResultMode.DISCARD,
    ),
)
print(f"{result.count} movies rated 8 or higher")

# Same table through the low-level client: items come back as plain Python values
client = boto3.client("dynamodb")
result = query_all(
    ClientFetcher(client, translate_errors=True),
    {
        "TableName": "Movies",
        "KeyConditionExpression": "#year = :year",
        "ExpressionAttributeNames": {"#year": "year"},
        "ExpressionAttributeValues": {":year": {"N": "2013"}},
    },
)
print(result.to_dict()["Count"])
