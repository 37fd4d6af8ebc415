# mongo_demo/cli/run_demo.py
"""
MongoDB 드라이버 데모 러너

연결 → 컬렉션 초기화 → 인덱스 생성 → 삽입 → 조회 → 수정 → 집계 → 지리 공간 쿼리 → 삭제
순서로 실행하며 각 단계 결과를 콘솔에 출력합니다.
연결/삽입/조회/수정 실패는 데모 전체를 중단하고, 나머지 단계는 실패해도 계속 진행합니다.
"""
import argparse
import asyncio
import logging
import sys
from logging.config import dictConfig
from typing import Callable, Optional

from pymongo import ASCENDING, GEOSPHERE, AsyncMongoClient

from mongo_demo.cli.console import error_log, info, print_table, section, success, warn
from mongo_demo.core.config import Settings, get_settings
from mongo_demo.database import create_client
from mongo_demo.utils.datetime import utc_now
from mongo_demo.utils.logger import cli_logger
from mongo_demo.utils.seed_data import (
    NYC_COORDINATES,
    bulk_users,
    primary_user,
    upsert_user_fields,
)

logger = logging.getLogger(__name__)

NEAR_MAX_DISTANCE_METERS = 1_000_000
UPSERT_EMAIL = "newuser@example.com"


class MongoDemo:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        client_factory: Callable[[Settings], AsyncMongoClient] = create_client,
    ):
        self.settings = settings or get_settings()
        self.client_factory = client_factory
        self.client = None
        self.db = None
        self.collection = None

    async def connect(self) -> None:
        try:
            self.client = self.client_factory(self.settings)
            await self.client.admin.command("ping")

            success("Connected to MongoDB")
            self.db = self.client[self.settings.DB_NAME]
            self.collection = self.db[self.settings.COLLECTION_NAME]

            info(f"Database   : {self.settings.DB_NAME}")
            info(f"Collection : {self.settings.COLLECTION_NAME}")
        except Exception as e:
            error_log("Connection error", e)
            raise

    async def disconnect(self) -> None:
        if self.client is not None:
            await self.client.close()
            self.client = None
            success("Disconnected from MongoDB")

    async def create_indexes(self) -> None:
        section("Index Creation")
        try:
            await self.collection.create_index([("email", ASCENDING)], unique=True)
            await self.collection.create_index([("age", ASCENDING)])
            await self.collection.create_index([("address.city", ASCENDING)])
            await self.collection.create_index([("location", GEOSPHERE)])

            success("Indexes created successfully")
            info("email (unique)")
            info("age")
            info("address.city")
            info("location (2dsphere)")
        except Exception as e:
            error_log("Index creation failed", e)

    async def insert_documents(self) -> None:
        section("Insert Documents")
        try:
            result = await self.collection.insert_one(primary_user())
            success("Single user inserted")
            info(f"ID: {result.inserted_id}")

            bulk_result = await self.collection.insert_many(bulk_users())
            success("Multiple users inserted")
            print_table([
                {"No": i + 1, "InsertedID": str(inserted_id)}
                for i, inserted_id in enumerate(bulk_result.inserted_ids)
            ])
        except Exception as e:
            error_log("Insert error", e)
            raise

    async def read_documents(self) -> None:
        section("Read Documents")
        try:
            all_users = await self.collection.find({}).to_list()
            young_users = await self.collection.find({"age": {"$lt": 30}}).to_list()
            user_names = await self.collection.find(
                {}, projection={"name": 1, "email": 1, "_id": 0}
            ).to_list()
            one_user = await self.collection.find_one({"name": "John Doe"})
            city_users = await self.collection.find({
                "address.city": {"$in": ["New York", "Los Angeles"]},
                "age": {"$gte": 25},
            }).to_list()
            total_count = await self.collection.count_documents({})

            success(f"Total users: {len(all_users)}")
            success(f"Users under 30: {len(young_users)}")
            success(f"Users in NY/LA (25+): {len(city_users)}")
            info(f"Lookup result: {one_user['name'] if one_user else 'Not Found'}")
            info(f"Document count: {total_count}")

            print_table(user_names, title="📇 Names & Emails", columns=["name", "email"])
        except Exception as e:
            error_log("Read error", e)
            raise

    async def update_documents(self) -> None:
        section("Update Documents")
        try:
            update_result = await self.collection.update_one(
                {"email": "john@example.com"},
                {
                    "$set": {
                        "age": 31,
                        "address.zipCode": "10002",
                        "updatedAt": utc_now(),
                    },
                    "$push": {"hobbies": "gaming"},
                },
            )
            success(f"Updated John Doe ({update_result.modified_count})")

            bulk_update_result = await self.collection.update_many(
                {"age": {"$lt": 30}},
                {"$set": {"category": "young", "updatedAt": utc_now()}},
            )
            success(f"Bulk updated users ({bulk_update_result.modified_count})")

            upsert_result = await self.collection.update_one(
                {"email": UPSERT_EMAIL},
                {"$set": upsert_user_fields()},
                upsert=True,
            )
            success(
                "New user created via upsert"
                if upsert_result.upserted_id is not None
                else "Existing user updated"
            )
        except Exception as e:
            error_log("Update error", e)
            raise

    async def run_aggregation(self) -> None:
        section("Aggregation")
        try:
            pipeline = [
                {"$match": {"age": {"$gt": 25}}},
                {
                    "$group": {
                        "_id": "$address.city",
                        "count": {"$sum": 1},
                        "avgAge": {"$avg": "$age"},
                        "users": {"$push": "$name"},
                    }
                },
                {"$sort": {"count": -1}},
            ]
            cursor = await self.collection.aggregate(pipeline)
            result = await cursor.to_list()

            print_table([
                {
                    "City": r["_id"],
                    "Users": r["count"],
                    "AvgAge": f"{r['avgAge']:.1f}",
                    "Names": ", ".join(r["users"]),
                }
                for r in result
            ], columns=["City", "Users", "AvgAge", "Names"])
        except Exception as e:
            error_log("Aggregation error", e)

    async def run_geospatial_queries(self) -> None:
        section("Geospatial Queries")
        try:
            nearby_users = await self.collection.find({
                "location": {
                    "$near": {
                        "$geometry": {"type": "Point", "coordinates": NYC_COORDINATES},
                        "$maxDistance": NEAR_MAX_DISTANCE_METERS,
                    }
                }
            }).to_list()

            success(f"Users within 1000km of NYC: {len(nearby_users)}")
            print_table([
                {"Name": u.get("name"), "City": u.get("address", {}).get("city")}
                for u in nearby_users
            ], columns=["Name", "City"])

            cursor = await self.collection.aggregate([
                {
                    "$geoNear": {
                        "near": {"type": "Point", "coordinates": NYC_COORDINATES},
                        "distanceField": "distanceFromNYC",
                        "spherical": True,
                        "distanceMultiplier": 0.001,
                    }
                },
                {
                    "$project": {
                        "name": 1,
                        "city": "$address.city",
                        "distanceFromNYC": {"$round": ["$distanceFromNYC", 2]},
                    }
                },
            ])
            users_with_distance = await cursor.to_list()

            print_table(
                users_with_distance,
                title="📏 Distance from NYC (km)",
                columns=["_id", "name", "city", "distanceFromNYC"],
            )
        except Exception as e:
            error_log("Geospatial error", e)

    async def delete_documents(self) -> None:
        section("Delete Documents")
        try:
            single = await self.collection.delete_one({"email": UPSERT_EMAIL})
            bulk = await self.collection.delete_many({"category": "young"})

            warn(f"Single deleted: {single.deleted_count}")
            warn(f"Bulk deleted: {bulk.deleted_count}")
        except Exception as e:
            error_log("Delete error", e)

    async def run_demo(self) -> bool:
        """
        전체 데모 시퀀스를 실행합니다.

        Returns:
            모든 필수 단계가 성공하면 True, 중단되면 False
        """
        section("MongoDB Demo Started 🚀")
        try:
            await self.connect()

            await self.collection.delete_many({})
            warn("Cleared existing documents")

            await self.create_indexes()
            await self.insert_documents()
            await self.read_documents()
            await self.update_documents()
            await self.run_aggregation()
            await self.run_geospatial_queries()
            await self.delete_documents()

            final_count = await self.collection.count_documents({})
            success(f"Final document count: {final_count}")
            success("Demo completed successfully 🎉")
            return True
        except Exception as e:
            error_log("Demo failed", e)
            logger.debug("데모 중단", exc_info=e)
            return False
        finally:
            await self.disconnect()


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Run the MongoDB driver demo.")
    parser.add_argument("--uri", help="MongoDB connection string (default: MONGODB_URI)")
    parser.add_argument("--db", help="Database name (default: DB_NAME)")
    parser.add_argument("--collection", help="Collection name (default: COLLECTION_NAME)")
    args = parser.parse_args(argv)

    dictConfig(cli_logger)

    overrides = {
        "MONGODB_URI": args.uri,
        "DB_NAME": args.db,
        "COLLECTION_NAME": args.collection,
    }
    settings = get_settings().model_copy(
        update={key: value for key, value in overrides.items() if value}
    )

    ok = asyncio.run(MongoDemo(settings).run_demo())
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
