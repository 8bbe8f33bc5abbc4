"""
Factory for creating session storage instances.
Simple, clean factory with singleton caching.
"""

from enum import Enum
from .strategies import (
    SessionStorageStrategy,
    FileSessionStorage,
    InMemorySessionStorage,
    RedisSessionStorage,
)
from shortlink_client.config import settings


class SessionBackend(Enum):
    """Available session storage backends"""
    FILE = "file"
    MEMORY = "memory"
    REDIS = "redis"


class SessionStorageFactory:
    """
    Simple factory for creating session storage instances.
    
    Uses Singleton Pattern - creates instance once, reuses it.
    Gets configuration from settings (not passed as parameters).
    """
    
    _instance: SessionStorageStrategy = None  # Single cached instance
    
    @classmethod
    def create(cls, backend: SessionBackend) -> SessionStorageStrategy:
        """
        Create or return cached storage instance.
        
        Args:
            backend: Type of storage backend (from enum)
            
        Returns:
            Singleton storage instance
        """
        if cls._instance is not None:
            return cls._instance
        
        if backend == SessionBackend.FILE:
            cls._instance = FileSessionStorage(settings.session_file_path)
            if settings.debug:
                print(f"✅ File session storage initialized ({cls._instance.path})")
            
        elif backend == SessionBackend.REDIS:
            import redis
            
            try:
                redis_client = redis.from_url(
                    settings.redis_url,
                    decode_responses=False,
                    socket_connect_timeout=2,
                    socket_timeout=2,
                )
                
                # Test connection immediately
                redis_client.ping()
                
                cls._instance = RedisSessionStorage(redis_client)
                if settings.debug:
                    print("✅ Redis session storage initialized")
                
            except Exception as e:
                print(f"⚠️  Redis connection failed: {e}")
                print("⚠️  Falling back to in-memory session storage")
                cls._instance = InMemorySessionStorage()
            
        elif backend == SessionBackend.MEMORY:
            cls._instance = InMemorySessionStorage()
            if settings.debug:
                print("✅ In-memory session storage initialized")
            
        else:
            raise ValueError(f"Unknown session backend: {backend}")
        
        return cls._instance
    
    @classmethod
    def clear_instance(cls):
        """Clear cached instance (for testing)"""
        cls._instance = None
