"""Database connections package."""

from blog_summarizer.db.dynamodb import DynamoDBClient, dynamodb
from blog_summarizer.db.postgres import get_engine, init_db, insert_summary

__all__ = ["get_engine", "init_db", "insert_summary", "dynamodb", "DynamoDBClient"]
