"""DynamoDB connection and table management for scraped blog content."""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4

import aioboto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from blog_summarizer.config import get_settings
from blog_summarizer.exceptions import PersistenceFailure


class DynamoDBClient:
    """Async DynamoDB client for raw content records."""

    def __init__(self):
        self.settings = get_settings()
        self.table_name = self.settings.dynamodb_table_name
        self.session = aioboto3.Session(
            aws_access_key_id=self.settings.aws_access_key_id or None,
            aws_secret_access_key=self.settings.aws_secret_access_key or None,
            region_name=self.settings.aws_region,
        )
        # Single attempt, writes are best-effort
        self.config = Config(retries={"max_attempts": 1, "mode": "standard"})

    async def get_client(self):
        """Get DynamoDB client context manager."""
        kwargs = {"config": self.config}
        if self.settings.dynamodb_endpoint_url:
            kwargs["endpoint_url"] = self.settings.dynamodb_endpoint_url
        return self.session.client("dynamodb", **kwargs)

    async def create_table_if_not_exists(self) -> None:
        """Create the content table if it doesn't exist."""
        async with await self.get_client() as client:
            try:
                await client.describe_table(TableName=self.table_name)
            except client.exceptions.ResourceNotFoundException:
                await client.create_table(
                    TableName=self.table_name,
                    KeySchema=[
                        {"AttributeName": "pk", "KeyType": "HASH"},  # Partition key
                        {"AttributeName": "sk", "KeyType": "RANGE"},  # Sort key
                    ],
                    AttributeDefinitions=[
                        {"AttributeName": "pk", "AttributeType": "S"},
                        {"AttributeName": "sk", "AttributeType": "S"},
                    ],
                    BillingMode="PAY_PER_REQUEST",
                )
                waiter = client.get_waiter("table_exists")
                await waiter.wait(TableName=self.table_name)

    @staticmethod
    def build_item(
        blog_url: str,
        title: str,
        content: str,
        word_count: int,
        summary_id: UUID,
        author: str | None = None,
        published_date: str | None = None,
        scraped_at: datetime | None = None,
    ) -> dict[str, Any]:
        """Build the DynamoDB item for one scraped page."""
        scraped_at = scraped_at or datetime.now(UTC)

        item = {
            "pk": {"S": f"URL#{blog_url}"},
            "sk": {"S": f"CONTENT#{scraped_at.isoformat()}#{uuid4()}"},
            "blog_url": {"S": blog_url},
            "title": {"S": title},
            "content": {"S": content},
            "scraped_at": {"S": scraped_at.isoformat()},
            "word_count": {"N": str(word_count)},
            "summary_id": {"S": str(summary_id)},
        }

        if author:
            item["author"] = {"S": author}
        if published_date:
            item["published_date"] = {"S": published_date}

        return item

    async def put_content(self, **fields: Any) -> dict[str, Any]:
        """Store a scraped page. Raises PersistenceFailure on any client error."""
        if not self.settings.dynamodb_configured:
            raise PersistenceFailure("DynamoDB is not configured")

        item = self.build_item(**fields)
        try:
            async with await self.get_client() as client:
                await client.put_item(TableName=self.table_name, Item=item)
        except (ClientError, BotoCoreError) as e:
            raise PersistenceFailure(f"Failed to store content for {fields.get('blog_url')}: {e}") from e

        return {"sk": item["sk"]["S"], "status": "created"}


# Singleton instance
dynamodb = DynamoDBClient()
