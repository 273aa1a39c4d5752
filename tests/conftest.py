"""Shared in-memory spec fixtures.

Trimmed-down botocore-style documents for a REST service (S3-like, global
endpoint) and an RPC-style service (DynamoDB-like, regional endpoint).
"""

from __future__ import annotations

import copy
from typing import Any

import pytest


_ENDPOINTS: dict[str, Any] = {
    "services": {
        "s3": {"isRegionalized": True},
        "iam": {
            "isRegionalized": False,
            "endpoints": {
                "aws-global": {"credentialScope": {"region": "us-east-1"}},
            },
        },
        "dynamodb": {},
    },
}

_REST_API: dict[str, Any] = {
    "metadata": {
        "apiVersion": "2006-03-01",
        "endpointPrefix": "s3",
        "protocol": "rest-xml",
        "serviceAbbreviation": "Amazon S3",
    },
    "operations": {
        "PutObject": {
            "http": {"method": "PUT", "requestUri": "/{Bucket}/{Key+}"},
            "input": {"shape": "PutObjectRequest"},
            "output": {"shape": "PutObjectOutput"},
        },
        "GetObject": {
            "http": {"method": "GET", "requestUri": "/{Bucket}/{Key+}"},
            "input": {"shape": "GetObjectRequest"},
            "output": {"shape": "GetObjectOutput"},
        },
        "CreateMultipartUpload": {
            "http": {"method": "POST", "requestUri": "/{Bucket}/{Key+}?uploads"},
            "input": {"shape": "CreateMultipartUploadRequest"},
        },
        "ListBuckets": {
            "http": {"method": "GET", "requestUri": "/", "responseCode": 200},
        },
        "DeleteBucket": {
            "http": {"method": "DELETE", "requestUri": "/{Bucket}", "responseCode": 204},
            "input": {"shape": "DeleteBucketRequest"},
        },
    },
    "shapes": {
        "GetObjectRequest": {
            "type": "structure",
            "members": {
                "Bucket": {"shape": "BucketName", "location": "uri", "locationName": "Bucket"},
                "IfMatch": {"shape": "IfMatch", "location": "header", "locationName": "If-Match"},
                "Key": {"shape": "ObjectKey", "location": "uri", "locationName": "Key"},
                "VersionId": {"shape": "ObjectVersionId", "location": "querystring", "locationName": "versionId"},
            },
        },
        "GetObjectOutput": {
            "type": "structure",
            "members": {
                "Body": {"shape": "Body"},
                "ETag": {"shape": "ETag", "location": "header", "locationName": "ETag"},
                "ContentLength": {"shape": "ContentLength", "location": "header", "locationName": "Content-Length"},
            },
        },
        "PutObjectRequest": {
            "type": "structure",
            "members": {
                "ACL": {"shape": "ObjectCannedACL", "location": "header", "locationName": "x-amz-acl"},
                "Body": {"shape": "Body"},
                "Bucket": {"shape": "BucketName", "location": "uri", "locationName": "Bucket"},
                "Key": {"shape": "ObjectKey", "location": "uri", "locationName": "Key"},
            },
        },
        "PutObjectOutput": {
            "type": "structure",
            "members": {
                "ETag": {"shape": "ETag", "location": "header", "locationName": "ETag"},
            },
        },
        "CreateMultipartUploadRequest": {
            "type": "structure",
            "members": {
                "Bucket": {"shape": "BucketName", "location": "uri", "locationName": "Bucket"},
                "Key": {"shape": "ObjectKey", "location": "uri", "locationName": "Key"},
            },
        },
        "DeleteBucketRequest": {
            "type": "structure",
            "members": {
                "Bucket": {"shape": "BucketName", "location": "uri", "locationName": "Bucket"},
            },
        },
    },
}

_POST_API: dict[str, Any] = {
    "metadata": {
        "apiVersion": "2012-08-10",
        "endpointPrefix": "dynamodb",
        "jsonVersion": "1.0",
        "protocol": "json",
        "serviceAbbreviation": "DynamoDB",
        "signingName": "dynamodb",
        "targetPrefix": "DynamoDB_20120810",
    },
    "operations": {
        "PutItem": {"input": {"shape": "PutItemInput"}},
        "BatchGetItem": {"input": {"shape": "BatchGetItemInput"}},
        "DescribeTable": {"input": {"shape": "DescribeTableInput"}},
    },
    "shapes": {},
}

_REST_DOCS: dict[str, Any] = {
    "service": "<p>Amazon Simple Storage Service</p>",
    "operations": {
        "GetObject": "<p>Retrieves objects from Amazon S3.</p>",
        "PutObject": "<p>Adds an object to a bucket.</p>",
    },
}

_POST_DOCS: dict[str, Any] = {
    "service": "<fullname>Amazon DynamoDB</fullname> <p>Fully managed NoSQL.</p>",
    "operations": {
        "PutItem": "<p>Creates a new item &amp; replaces an old one.</p>",
    },
}


@pytest.fixture
def endpoints_spec() -> dict[str, Any]:
    return copy.deepcopy(_ENDPOINTS)


@pytest.fixture
def rest_api() -> dict[str, Any]:
    return copy.deepcopy(_REST_API)


@pytest.fixture
def rest_docs() -> dict[str, Any]:
    return copy.deepcopy(_REST_DOCS)


@pytest.fixture
def post_api() -> dict[str, Any]:
    return copy.deepcopy(_POST_API)


@pytest.fixture
def post_docs() -> dict[str, Any]:
    return copy.deepcopy(_POST_DOCS)
